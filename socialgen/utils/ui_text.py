"""
Localized user-facing strings.
"""

from typing import Dict

from socialgen.models.platform import Language

UI_TEXT: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Social Media AI Generator",
        "subtitle": "Create optimized posts and adapt your image for all platforms.",
        "descPlaceholder": "Enter detailed product description...",
        "urlPlaceholder": "Product Link (e.g., https://example.com)",
        "keywordPlaceholder": "Main Keyword (e.g., Digital Marketing)",
        "uploadImage": "Upload Post Image",
        "changeImage": "Change",
        "removeImage": "Remove",
        "generateBtn": "Generate & Adapt",
        "generating": "Generating...",
        "copy": "Copy",
        "copied": "Copied!",
        "download": "Download",
        "clear": "Clear",
        "inputs": "Inputs",
        "results": "Generated Results",
        "error": "Something went wrong. Please try again.",
        "fillAll": "Please fill in all fields, including the image.",
        "pinterestTitle": "📌 Pin Title",
        "pinterestDesc": "📄 Pin Description",
        "youtubeTitle": "🎬 Video Title",
        "youtubeDesc": "📝 Video Description",
        "defaultTitle": "Title",
        "defaultDesc": "Description",
        "words": "Words",
        "characters": "Characters",
    },
    "ar": {
        "title": "مولد محتوى التواصل الاجتماعي",
        "subtitle": "أنشئ منشورات احترافية وعدّل صورتك لتناسب جميع المنصات.",
        "descPlaceholder": "أدخل وصفاً تفصيلياً للمنتج...",
        "urlPlaceholder": "رابط المنتج (مثال: https://example.com)",
        "keywordPlaceholder": "الكلمة الرئيسية (مثال: تسويق رقمي)",
        "uploadImage": "ارفع صورة المنتج",
        "changeImage": "تغيير",
        "removeImage": "إزالة",
        "generateBtn": "توليد وتعديل",
        "generating": "جاري التوليد...",
        "copy": "نسخ",
        "copied": "تم النسخ!",
        "download": "تحميل",
        "clear": "مسح",
        "inputs": "المدخلات",
        "results": "النتائج المولدة",
        "error": "حدث خطأ ما. يرجى المحاولة مرة أخرى.",
        "fillAll": "يرجى ملء جميع الحقول، بما في ذلك الصورة.",
        "pinterestTitle": "📌 عنوان المنشور",
        "pinterestDesc": "📄 وصف المنشور",
        "youtubeTitle": "🎬 عنوان الفيديو",
        "youtubeDesc": "📝 وصف الفيديو",
        "defaultTitle": "العنوان",
        "defaultDesc": "الوصف",
        "words": "كلمة",
        "characters": "حرف",
    },
}


def get_ui_text(language) -> Dict[str, str]:
    """Return the strings for a language, falling back to English per key."""
    try:
        code = Language(language).value
    except ValueError:
        code = Language.ENGLISH.value
    return {**UI_TEXT["en"], **UI_TEXT[code]}


def translate(language, key: str) -> str:
    return get_ui_text(language).get(key, key)
