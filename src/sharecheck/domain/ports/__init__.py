from .share_provider import ShareProviderPort

__all__ = ["ShareProviderPort"]
