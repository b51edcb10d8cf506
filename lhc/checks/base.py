from typing import Any, List, Mapping, Optional
from dataclasses import dataclass, field
from pathlib import Path
import uuid


@dataclass(frozen=True)
class FileLocation:
    path: Path
    line: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.path}:{self.line}" if self.line else str(self.path)


@dataclass(frozen=True)
class IssueType:
    """
    Represents a type of issue.
    """
    id: str
    message: str

    def __post_init__(self):
        # Verify that the ID is a valid UUID
        if not isinstance(self.id, str):
            raise ValueError(f"Invalid ID: {self.id}")
        try:
            uuid.UUID(self.id)
        except ValueError:
            raise ValueError(f"Invalid UUID: {self.id}")

    def make(self, **kwargs) -> 'Issue':
        """
        Creates an Issue of this type.
        """
        return Issue(self, data=kwargs)


@dataclass
class Issue:
    """
    Represents an issue found during a check.
    """
    issue_type: IssueType
    data: Mapping[str, Any] | None = None
    location: FileLocation | None = None

    def at(self, path: Path, line: int | None = None) -> 'Issue':
        """
        Returns an Issue with the specified path.
        """
        if self.location is not None and self.location.path != path:
            raise ValueError("Cannot change the path of an existing issue.")
        self.location = FileLocation(path, line)
        return self

    def __str__(self) -> str:
        msg = str(self.location) + ' > ' if self.location is not None else '> '
        return msg + self.issue_type.message.format(**(self.data or {}))


@dataclass
class IssueList:
    """
    Represents a list of issues found while checking one file.
    """
    issues: List[Issue] = field(default_factory=list)

    def append(self, issue: Issue) -> None:
        self.issues.append(issue)

    def extend(self, issues: 'List[Issue] | IssueList') -> None:
        self.issues.extend(issues)

    def __iter__(self):
        return iter(self.issues)

