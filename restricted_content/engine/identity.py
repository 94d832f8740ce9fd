from dataclasses import dataclass
from typing import Optional, Protocol, Union


@dataclass(frozen=True)
class ViewerIdentity:
    is_logged_in: bool
    email: Optional[str] = None  # only set for logged-in viewers

    def __post_init__(self):
        if not self.is_logged_in and self.email is not None:
            raise ValueError("Anonymous viewers cannot have an email")

    @classmethod
    def anonymous(cls) -> "ViewerIdentity":
        return cls(is_logged_in=False)

    @classmethod
    def logged_in(cls, email: str) -> "ViewerIdentity":
        return cls(is_logged_in=True, email=email)


class IdentityProvider(Protocol):
    """Session lookup supplied by the host, called once per render."""

    def __call__(self) -> ViewerIdentity: ...


def resolve_viewer(viewer: Union[ViewerIdentity, IdentityProvider]) -> ViewerIdentity:
    if isinstance(viewer, ViewerIdentity):
        return viewer
    return viewer()
