"""The check catalog, one function per report category.

Every function is pure: it reads the page snapshot and returns its items in a
fixed order. A missing signal becomes a warning or error item, never an
exception.
"""

import re

from document import PageDocument
from models import HeaderMap
from resolver import resolve_url
from schemas import CheckItem
from scoring import round_half_up

_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT = re.compile(r"^\s*//", re.MULTILINE)
_AI_META_MARKERS = ("ai", "bot", "llm")


def _present_or_warn(name: str, value: str | None, found: str, missing: str) -> CheckItem:
    if value:
        return CheckItem(name=name, status="success", message=found, preview=value)
    return CheckItem(name=name, status="warning", message=missing)


def _resolved(base_url: str, value: str | None) -> str | None:
    value = (value or "").strip()
    return resolve_url(base_url, value) if value else None


# --- Metadata ---


def check_metadata(doc: PageDocument, base_url: str) -> list[CheckItem]:
    items: list[CheckItem] = []

    title = doc.element_text("title")
    if not title:
        items.append(CheckItem(name="Title", status="error", message="Title tag is missing"))
    elif 10 < len(title) < 70:
        items.append(
            CheckItem(
                name="Title",
                status="success",
                message=f"Title present with optimal length ({len(title)} characters)",
                preview=title,
            )
        )
    else:
        items.append(
            CheckItem(
                name="Title",
                status="warning",
                message=(
                    f"Title present but length ({len(title)} characters) is not optimal "
                    "(recommended: 10-70 characters)"
                ),
                preview=title,
            )
        )

    description = doc.attribute('meta[name="description"]', "content")
    if not description:
        items.append(
            CheckItem(name="Meta Description", status="error", message="Meta description is missing")
        )
    elif 50 < len(description) < 160:
        items.append(
            CheckItem(
                name="Meta Description",
                status="success",
                message=f"Meta description present with optimal length ({len(description)} characters)",
                preview=description,
            )
        )
    else:
        items.append(
            CheckItem(
                name="Meta Description",
                status="warning",
                message=(
                    f"Meta description present but length ({len(description)} characters) is not optimal "
                    "(recommended: 50-160 characters)"
                ),
                preview=description,
            )
        )

    keywords = doc.attribute('meta[name="keywords"]', "content")
    items.append(
        _present_or_warn(
            "Meta Keywords",
            keywords,
            "Meta keywords present",
            "Meta keywords not present (not critical for SEO but may help with some search engines)",
        )
    )

    canonical = _resolved(base_url, doc.attribute('link[rel="canonical"]', "href"))
    items.append(
        _present_or_warn(
            "Canonical URL",
            canonical,
            f"Canonical URL present: {canonical}",
            "Canonical URL not present (recommended to prevent duplicate content issues)",
        )
    )

    viewport = doc.attribute('meta[name="viewport"]', "content")
    if viewport:
        items.append(
            CheckItem(
                name="Viewport",
                status="success",
                message=f"Viewport tag present: {viewport}",
                preview=viewport,
            )
        )
    else:
        items.append(
            CheckItem(
                name="Viewport",
                status="error",
                message="Viewport meta tag is missing (required for responsive design)",
            )
        )

    charset = doc.attribute("meta[charset]", "charset")
    if charset:
        items.append(
            CheckItem(
                name="Character Set",
                status="success",
                message=f"Character set specified: {charset}",
                preview=charset,
            )
        )
    else:
        items.append(
            CheckItem(name="Character Set", status="error", message="Character set meta tag is missing")
        )

    language = doc.attribute("html", "lang")
    items.append(
        _present_or_warn(
            "Language",
            language,
            f"Language specified: {language}",
            "HTML lang attribute is missing (recommended for accessibility and SEO)",
        )
    )

    return items


# --- Favicon ---


def _icon_item(
    doc: PageDocument,
    base_url: str,
    *,
    name: str,
    selector: str,
    missing_status: str,
    missing_message: str,
) -> CheckItem:
    element = doc.first(selector)
    if element is None:
        return CheckItem(name=name, status=missing_status, message=missing_message)

    href = _resolved(base_url, element["attrs"].get("href"))
    message = f"{name} present: {href}" if href else f"{name} present"
    return CheckItem(name=name, status="success", message=message, preview=href)


def check_favicon(doc: PageDocument, base_url: str) -> list[CheckItem]:
    return [
        _icon_item(
            doc,
            base_url,
            name="Standard Favicon",
            selector='link[rel="icon"], link[rel="shortcut icon"]',
            missing_status="error",
            missing_message="Standard favicon is missing",
        ),
        _icon_item(
            doc,
            base_url,
            name="Apple Touch Icon",
            selector='link[rel="apple-touch-icon"]',
            missing_status="warning",
            missing_message="Apple Touch Icon is missing (recommended for iOS devices)",
        ),
        _icon_item(
            doc,
            base_url,
            name="Web App Manifest",
            selector='link[rel="manifest"]',
            missing_status="warning",
            missing_message="Web App Manifest is missing (recommended for PWA support)",
        ),
    ]


# --- Social Media ---


def check_social_media(doc: PageDocument, base_url: str) -> list[CheckItem]:
    og_title = doc.attribute('meta[property="og:title"]', "content")
    og_description = doc.attribute('meta[property="og:description"]', "content")
    og_image = _resolved(base_url, doc.attribute('meta[property="og:image"]', "content"))
    og_url = _resolved(base_url, doc.attribute('meta[property="og:url"]', "content"))
    twitter_card = doc.attribute('meta[name="twitter:card"]', "content")
    twitter_image = _resolved(base_url, doc.attribute('meta[name="twitter:image"]', "content"))

    og_missing = "is missing (recommended for social media sharing)"
    return [
        _present_or_warn("OG Title", og_title, f"Open Graph title present: {og_title}", f"Open Graph title {og_missing}"),
        _present_or_warn(
            "OG Description",
            og_description,
            "Open Graph description present",
            f"Open Graph description {og_missing}",
        ),
        _present_or_warn("OG Image", og_image, f"Open Graph image present: {og_image}", f"Open Graph image {og_missing}"),
        _present_or_warn("OG URL", og_url, f"Open Graph URL present: {og_url}", f"Open Graph URL {og_missing}"),
        _present_or_warn(
            "Twitter Card",
            twitter_card,
            f"Twitter Card present: {twitter_card}",
            "Twitter Card is missing (recommended for Twitter sharing)",
        ),
        _present_or_warn(
            "Twitter Image",
            twitter_image,
            "Twitter Image present",
            "Twitter Image is missing (recommended for Twitter sharing)",
        ),
    ]


# --- SEO Files ---

SEO_FILES = ("robots.txt", "sitemap.xml", "humans.txt", "security.txt")


def _unverified(filename: str) -> CheckItem:
    # Existence is not fetched; an auxiliary request would be needed to upgrade this.
    return CheckItem(
        name=filename,
        status="warning",
        message=f"Could not verify {filename} file (server-side check required)",
    )


def check_seo_files(url: str) -> list[CheckItem]:
    return [_unverified(filename) for filename in SEO_FILES]


# --- Performance ---


def _has_comment(blocks: list[str], *patterns: re.Pattern) -> bool:
    return any(pattern.search(block) for block in blocks for pattern in patterns)


def check_performance(doc: PageDocument, html: str, headers: HeaderMap) -> list[CheckItem]:
    items: list[CheckItem] = []

    cache_control = headers.get("cache-control")
    items.append(
        _present_or_warn(
            "Cache Control",
            cache_control,
            f"Cache-Control header present: {cache_control}",
            "Cache-Control header is missing (recommended for better performance)",
        )
    )

    size_kb = round_half_up(len(html.encode("utf-8")), 1024)
    if size_kb < 100:
        status, message = "success", f"HTML size is good ({size_kb} KB)"
    elif size_kb < 200:
        status, message = "warning", f"HTML size is acceptable ({size_kb} KB)"
    else:
        status, message = "error", f"HTML size is too large ({size_kb} KB, recommended: < 100 KB)"
    items.append(CheckItem(name="HTML Size", status=status, message=message, preview=f"{size_kb} KB"))

    styles = [el["text"] for el in doc.all_matching("style")]
    if _has_comment(styles, _BLOCK_COMMENT):
        items.append(
            CheckItem(
                name="CSS Minification",
                status="warning",
                message="CSS might not be minified (detected comments or inline styles)",
            )
        )
    else:
        items.append(
            CheckItem(
                name="CSS Minification",
                status="success",
                message="CSS appears to be minified or loaded externally",
            )
        )

    scripts = [
        el["text"]
        for el in doc.all_matching("script:not([src])")
        if "json" not in el["attrs"].get("type", "").lower()
    ]
    if _has_comment(scripts, _BLOCK_COMMENT, _LINE_COMMENT):
        items.append(
            CheckItem(
                name="JS Minification",
                status="warning",
                message="JavaScript might not be minified (detected comments or inline scripts)",
            )
        )
    else:
        items.append(
            CheckItem(
                name="JS Minification",
                status="success",
                message="JavaScript appears to be minified or loaded externally",
            )
        )

    encoding = headers.get("content-encoding")
    if encoding and ("gzip" in encoding.lower() or "br" in encoding.lower()):
        items.append(
            CheckItem(
                name="Compression",
                status="success",
                message=f"Content compression is enabled: {encoding}",
                preview=encoding,
            )
        )
    else:
        items.append(
            CheckItem(
                name="Compression",
                status="warning",
                message="Content compression (gzip/brotli) may not be enabled",
                preview=encoding or None,
            )
        )

    return items


# --- AI Integration ---


def _is_ai_meta(attrs: dict[str, str]) -> bool:
    for key in ("name", "property"):
        value = attrs.get(key, "").lower()
        if any(marker in value for marker in _AI_META_MARKERS):
            return True
    return False


def check_ai_integration(doc: PageDocument, url: str) -> list[CheckItem]:
    items = [
        CheckItem(
            name="LLM.txt",
            status="warning",
            message="Could not verify llm.txt file (server-side check required)",
        )
    ]

    ai_tags = [el["attrs"] for el in doc.all_matching("meta") if _is_ai_meta(el["attrs"])]
    if ai_tags:
        preview = "\n".join(
            f"{attrs.get('name') or attrs.get('property')}: {attrs.get('content', '')}" for attrs in ai_tags
        )
        items.append(
            CheckItem(
                name="AI Meta Tags",
                status="success",
                message=f"Found {len(ai_tags)} AI-related meta tags",
                preview=preview,
            )
        )
    else:
        items.append(
            CheckItem(
                name="AI Meta Tags",
                status="warning",
                message="No AI-related meta tags found (optional but becoming more common)",
            )
        )

    blocks = doc.all_matching('script[type="application/ld+json"]')
    if blocks:
        items.append(
            CheckItem(
                name="Structured Data",
                status="success",
                message=f"Found {len(blocks)} structured data blocks",
                preview=blocks[0]["text"] or None,
            )
        )
    else:
        items.append(
            CheckItem(
                name="Structured Data",
                status="warning",
                message="No structured data found (recommended for better SEO and AI understanding)",
            )
        )

    return items


# --- Security ---


def check_security(headers: HeaderMap) -> list[CheckItem]:
    items: list[CheckItem] = []

    is_https = headers.get("x-forwarded-proto") == "https" or headers.get("x-forwarded-protocol") == "https"
    if is_https:
        items.append(CheckItem(name="HTTPS", status="success", message="Website is served over HTTPS"))
    else:
        items.append(
            CheckItem(
                name="HTTPS",
                status="error",
                message="Website is not served over HTTPS (strongly recommended for security)",
            )
        )

    items.append(
        _present_or_warn(
            "Content Security Policy",
            headers.get("content-security-policy"),
            "Content Security Policy is implemented",
            "Content Security Policy header is missing (recommended for better security)",
        )
    )

    content_type_options = headers.get("x-content-type-options")
    if content_type_options == "nosniff":
        items.append(
            CheckItem(
                name="X-Content-Type-Options",
                status="success",
                message="X-Content-Type-Options header is properly set",
                preview=content_type_options,
            )
        )
    else:
        items.append(
            CheckItem(
                name="X-Content-Type-Options",
                status="warning",
                message="X-Content-Type-Options header is missing or not set to nosniff",
                preview=content_type_options or None,
            )
        )

    xss_protection = headers.get("x-xss-protection")
    items.append(
        _present_or_warn(
            "X-XSS-Protection",
            xss_protection,
            f"X-XSS-Protection header is set: {xss_protection}",
            "X-XSS-Protection header is missing",
        )
    )

    items.append(
        _present_or_warn(
            "HTTP Strict Transport Security",
            headers.get("strict-transport-security"),
            "HSTS header is implemented",
            "HSTS header is missing (recommended for HTTPS security)",
        )
    )

    return items
