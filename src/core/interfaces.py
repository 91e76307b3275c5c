"""Core protocol and interface definitions.

Defines the InfographicSource protocol implemented by the repository and
article sources, and the ImageModel protocol the tools use to talk to the
generation API (so fakes can be injected in tests).
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from core.models import Citation, PreparedInfographic


class InfographicSource(Protocol):
    """Contract for anything that can be turned into an infographic prompt."""
    async def prepare(
        self,
        *,
        style: Optional[str] = None,
        language: str = "English",
        is_3d: bool = False,
    ) -> PreparedInfographic:
        ...


class ImageModel(Protocol):
    """Contract for the multimodal generation API."""
    async def generate_image(
        self,
        prompt: str,
        *,
        image: Optional[bytes] = None,
        mime_type: str = "image/png",
    ) -> Optional[bytes]:
        ...

    async def generate_text(
        self,
        prompt: str,
        *,
        image: Optional[bytes] = None,
        mime_type: str = "image/png",
    ) -> str:
        ...

    async def analyze_with_search(self, prompt: str) -> Tuple[str, List[Citation]]:
        ...
