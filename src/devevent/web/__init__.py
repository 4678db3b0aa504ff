from devevent.web.pages import get_page_cache, reset_page_cache, router

__all__ = ["get_page_cache", "reset_page_cache", "router"]
