"""Gist operations."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ..domain import EditGistRequest, Gist, GistFile, NewGistRequest, json_decoder
from .base import ApiRequest, Operation, OperationGroup, segment


def _freeze_files(op: Operation) -> None:
    # Private read-only copy; later edits to the caller's dict do not leak in
    object.__setattr__(op, 'files', MappingProxyType(dict(op.files)))


def _hash_with_files(op: Operation) -> int:
    return hash(tuple(
        tuple(sorted(value.items())) if isinstance(value, Mapping) else value
        for value in op.__dict__.values()))


class GistOp(Operation):
    """Marker base for the gists group."""


@dataclass(frozen=True)
class NewGist(GistOp):
    description: str
    public: bool
    files: Mapping[str, GistFile]

    __hash__ = _hash_with_files

    def __post_init__(self):
        _freeze_files(self)

    def request(self) -> ApiRequest:
        body = NewGistRequest(description=self.description, public=self.public, files=dict(self.files))
        return ApiRequest("POST", "gists", body=body.to_dict(), decoder=json_decoder(Gist))


@dataclass(frozen=True)
class GetGist(GistOp):
    """Get a gist, or one of its revisions when sha is given."""
    gist_id: str
    sha: Optional[str] = None

    def request(self) -> ApiRequest:
        path = f"gists/{segment(self.gist_id)}"
        if self.sha:
            path = f"{path}/{segment(self.sha)}"
        return ApiRequest("GET", path, decoder=json_decoder(Gist))


@dataclass(frozen=True)
class EditGist(GistOp):
    """Edit a gist; map a filename to None to delete that file."""
    gist_id: str
    description: str
    files: Mapping[str, Optional[GistFile]]

    __hash__ = _hash_with_files

    def __post_init__(self):
        _freeze_files(self)

    def request(self) -> ApiRequest:
        body = EditGistRequest(description=self.description, files=dict(self.files))
        return ApiRequest("PATCH", f"gists/{segment(self.gist_id)}",
                          body=body.to_dict(), decoder=json_decoder(Gist))


GISTS = OperationGroup("gists", (NewGist, GetGist, EditGist))
