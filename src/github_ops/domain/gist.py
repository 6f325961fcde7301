"""Gist records and request bodies."""

from typing import Any, Dict, Optional

from .common import GitHubModel, RequestBody


class GistFile(GitHubModel):
    content: Optional[str] = None
    filename: Optional[str] = None
    language: Optional[str] = None
    raw_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """The writable part of the file: its content and new name."""
        return self.model_dump(include={'content', 'filename'}, exclude_none=True)


class Gist(GitHubModel):
    id: str
    url: str
    public: bool
    files: Dict[str, GistFile]
    html_url: Optional[str] = None
    description: Optional[str] = None


class NewGistRequest(RequestBody):
    description: str
    public: bool
    files: Dict[str, GistFile]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'description': self.description,
            'public': self.public,
            'files': {name: f.to_dict() for name, f in self.files.items()}
        }


class EditGistRequest(RequestBody):
    """A file mapped to None is deleted from the gist."""
    description: str
    files: Dict[str, Optional[GistFile]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'description': self.description,
            'files': {name: (f.to_dict() if f is not None else None)
                      for name, f in self.files.items()}
        }
