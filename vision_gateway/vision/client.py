"""VisionClient — abstract base for image annotation backends."""
from abc import ABC, abstractmethod

from vision_gateway.annotations import Feature, NativeAnnotationResult


class VisionProviderError(Exception):
    """Any failure of the outbound annotation call. Carries a human-readable detail."""


class VisionClient(ABC):
    @abstractmethod
    async def analyze(
        self, image_bytes: bytes, features: tuple[Feature, ...]
    ) -> NativeAnnotationResult:
        """Annotate image bytes with every requested feature in one call. Raises VisionProviderError."""
        ...

    async def close(self) -> None:
        """Release provider connections. Backends without any keep the default."""
