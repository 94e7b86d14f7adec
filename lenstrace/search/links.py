"""Manual reverse image search links."""

from urllib.parse import quote

_SEARCH_ENGINES: dict[str, str] = {
    "google_lens": "https://lens.google.com/uploadbyurl?url={url}",
    "bing": "https://www.bing.com/images/search?view=detailv2&iss=sbi&q=imgurl:{url}",
    "yandex": "https://yandex.com/images/search?rpt=imageview&url={url}",
    "tineye": "https://tineye.com/search?url={url}",
}


def manual_search_links(media_url: str) -> dict[str, str]:
    """Build reverse image search links a person can open by hand."""
    encoded = quote(media_url, safe="")
    return {
        engine: template.format(url=encoded)
        for engine, template in _SEARCH_ENGINES.items()
    }
