"""GoogleVisionClient — Google Cloud Vision annotation backend."""
import logging
from typing import Optional

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import vision
from google.cloud.vision import ImageAnnotatorAsyncClient

from vision_gateway.annotations import (
    Feature,
    LabelAnnotation,
    Likelihood,
    NativeAnnotationResult,
    SafeSearchAnnotation,
    TextAnnotation,
)
from vision_gateway.constants import (
    ERR_EMPTY_PROVIDER_RESPONSE,
    MSG_CREDENTIALS_DEFAULT,
    MSG_CREDENTIALS_LOADED,
)
from vision_gateway.vision.client import VisionClient, VisionProviderError

logger = logging.getLogger(__name__)

_PROVIDER_FAILURES = (GoogleAPIError, GoogleAuthError, OSError, ValueError)


# ── proto → native conversion ─────────────────────────────────────────────────


def _likelihood(value: vision.Likelihood) -> Likelihood:
    return Likelihood[vision.Likelihood(value).name]


def to_native(response: vision.AnnotateImageResponse) -> NativeAnnotationResult:
    """Convert one provider response; unset sub-annotations become empty / None."""
    match "safe_search_annotation" in response:
        case True:
            s = response.safe_search_annotation
            safe_search = SafeSearchAnnotation(
                adult=_likelihood(s.adult),
                violence=_likelihood(s.violence),
                racy=_likelihood(s.racy),
                spoof=_likelihood(s.spoof),
                medical=_likelihood(s.medical),
            )
        case False:
            safe_search = None

    return NativeAnnotationResult(
        labels=tuple(
            LabelAnnotation(description=a.description, score=a.score)
            for a in response.label_annotations
        ),
        texts=tuple(TextAnnotation(description=a.description) for a in response.text_annotations),
        safe_search=safe_search,
    )


def build_request(image_bytes: bytes, features: tuple[Feature, ...]) -> vision.AnnotateImageRequest:
    return vision.AnnotateImageRequest(
        image=vision.Image(content=image_bytes),
        features=[vision.Feature(type_=vision.Feature.Type[f.value]) for f in features],
    )


# ── client ────────────────────────────────────────────────────────────────────


class GoogleVisionClient(VisionClient):

    def __init__(self, credentials_path: Optional[str] = None) -> None:
        self._credentials_path = credentials_path
        self._sdk: Optional[ImageAnnotatorAsyncClient] = None

    def _client(self) -> ImageAnnotatorAsyncClient:
        # Built on first use so the gRPC channel binds to the serving loop, then reused.
        match self._sdk:
            case None:
                self._sdk = self._build_client()
            case _:
                pass
        return self._sdk

    def _build_client(self) -> ImageAnnotatorAsyncClient:
        match self._credentials_path:
            case str() as path if path:
                logger.debug(MSG_CREDENTIALS_LOADED, path)
                return ImageAnnotatorAsyncClient.from_service_account_file(path)
            case _:
                logger.debug(MSG_CREDENTIALS_DEFAULT)
                return ImageAnnotatorAsyncClient()

    async def analyze(
        self, image_bytes: bytes, features: tuple[Feature, ...]
    ) -> NativeAnnotationResult:
        request = build_request(image_bytes, features)
        try:
            client = self._client()
            batch = await client.batch_annotate_images(requests=[request])
        except _PROVIDER_FAILURES as exc:
            raise VisionProviderError(str(exc)) from exc

        match list(batch.responses):
            case [response, *_]:
                pass
            case _:
                raise VisionProviderError(ERR_EMPTY_PROVIDER_RESPONSE)

        match response.error.code:
            case 0:
                return to_native(response)
            case _:
                raise VisionProviderError(response.error.message)

    async def close(self) -> None:
        match self._sdk:
            case None:
                pass
            case sdk:
                self._sdk = None
                await sdk.transport.close()
