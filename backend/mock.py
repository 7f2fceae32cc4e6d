"""Canned report for offline/development use (USE_FIXTURE_DATA=1).

Scores are computed from the items so the fixture always agrees with the scorer.
"""

from report import build_result
from schemas import AnalysisResult, CheckItem

_STRUCTURED_DATA_SAMPLE = """{
  "@context": "https://schema.org",
  "@type": "WebSite",
  "name": "Example Website",
  "url": "https://example.com"
}"""


def _item(name: str, status: str, message: str, preview: str | None = None) -> CheckItem:
    return CheckItem(name=name, status=status, message=message, preview=preview)


def create_mock_result(url: str) -> AnalysisResult:
    """Return a realistic, structurally complete report for `url` without fetching it."""
    favicon_url = url.rstrip("/") + "/favicon.ico"
    item_groups = [
        (
            "Metadata",
            [
                _item(
                    "Title",
                    "success",
                    "Title present with optimal length (54 characters)",
                    "Site Analyzer - Check your website publishing basics",
                ),
                _item(
                    "Meta Description",
                    "success",
                    "Meta description present with optimal length (119 characters)",
                    "Checks common oversights in website publishing, from SEO essentials "
                    "to performance and security headers.",
                ),
                _item(
                    "Meta Keywords",
                    "warning",
                    "Meta keywords not present (not critical for SEO but may help with some search engines)",
                ),
                _item("Canonical URL", "success", f"Canonical URL present: {url}", url),
                _item(
                    "Viewport",
                    "success",
                    "Viewport tag present: width=device-width, initial-scale=1.0",
                    "width=device-width, initial-scale=1.0",
                ),
                _item("Character Set", "success", "Character set specified: UTF-8", "UTF-8"),
                _item("Language", "success", "Language specified: en", "en"),
            ],
        ),
        (
            "Favicon",
            [
                _item("Standard Favicon", "success", f"Standard Favicon present: {favicon_url}", favicon_url),
                _item("Apple Touch Icon", "warning", "Apple Touch Icon is missing (recommended for iOS devices)"),
                _item("Web App Manifest", "warning", "Web App Manifest is missing (recommended for PWA support)"),
            ],
        ),
        (
            "Social Media",
            [
                _item("OG Title", "success", "Open Graph title present: Example Website", "Example Website"),
                _item(
                    "OG Description",
                    "success",
                    "Open Graph description present",
                    "This is an example website description for social media sharing",
                ),
                _item("OG Image", "warning", "Open Graph image is missing (recommended for social media sharing)"),
                _item("OG URL", "warning", "Open Graph URL is missing (recommended for social media sharing)"),
                _item("Twitter Card", "warning", "Twitter Card is missing (recommended for Twitter sharing)"),
                _item("Twitter Image", "warning", "Twitter Image is missing (recommended for Twitter sharing)"),
            ],
        ),
        (
            "SEO Files",
            [
                _item(name, "warning", f"Could not verify {name} file (server-side check required)")
                for name in ("robots.txt", "sitemap.xml", "humans.txt", "security.txt")
            ],
        ),
        (
            "Performance",
            [
                _item(
                    "Cache Control",
                    "success",
                    "Cache-Control header present: max-age=3600, public",
                    "max-age=3600, public",
                ),
                _item("HTML Size", "success", "HTML size is good (42 KB)", "42 KB"),
                _item("CSS Minification", "success", "CSS appears to be minified or loaded externally"),
                _item("JS Minification", "success", "JavaScript appears to be minified or loaded externally"),
                _item("Compression", "warning", "Content compression (gzip/brotli) may not be enabled"),
            ],
        ),
        (
            "AI Integration",
            [
                _item("LLM.txt", "warning", "Could not verify llm.txt file (server-side check required)"),
                _item("AI Meta Tags", "warning", "No AI-related meta tags found (optional but becoming more common)"),
                _item("Structured Data", "success", "Found 2 structured data blocks", _STRUCTURED_DATA_SAMPLE),
            ],
        ),
        (
            "Security",
            [
                _item("HTTPS", "success", "Website is served over HTTPS"),
                _item(
                    "Content Security Policy",
                    "warning",
                    "Content Security Policy header is missing (recommended for better security)",
                ),
                _item("X-Content-Type-Options", "success", "X-Content-Type-Options header is properly set", "nosniff"),
                _item("X-XSS-Protection", "success", "X-XSS-Protection header is set: 1; mode=block", "1; mode=block"),
                _item(
                    "HTTP Strict Transport Security",
                    "warning",
                    "HSTS header is missing (recommended for HTTPS security)",
                ),
            ],
        ),
    ]
    return build_result(url, item_groups)
