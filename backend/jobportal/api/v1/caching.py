"""Cache-Control directives for list reads."""

from fastapi import Response

from jobportal.config import get_settings

NO_STORE = "no-store"


def cache_control(cacheable: bool) -> str:
    if not cacheable:
        return NO_STORE
    settings = get_settings()
    return (
        f"public, s-maxage={settings.cache_s_maxage}, "
        f"stale-while-revalidate={settings.cache_stale_while_revalidate}"
    )


def set_cache_headers(response: Response, cacheable: bool) -> None:
    response.headers["Cache-Control"] = cache_control(cacheable)
