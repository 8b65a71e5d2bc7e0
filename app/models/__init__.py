from .media import ImageResource, OperationResult, UploadOptions

__all__ = [
    "ImageResource",
    "OperationResult",
    "UploadOptions",
]
