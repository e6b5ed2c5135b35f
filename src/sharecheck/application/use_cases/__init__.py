from .check_share import CheckShareUseCase

__all__ = ["CheckShareUseCase"]
