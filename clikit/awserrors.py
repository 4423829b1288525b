"""Errors raised while looking up and scaling cloud resources."""

from __future__ import annotations

from collections.abc import Iterable


class MultipleLookupErrors(Exception):
    """A collection of errors found while looking up a resource."""

    def __init__(self, errors: Iterable[BaseException] | None = None) -> None:
        super().__init__()
        self.errors: list[BaseException] = list(errors or [])

    def __str__(self) -> str:
        messages = [f"{len(self.errors)} errors found during lookup:"]
        messages.extend(str(error) for error in self.errors)
        return "\n".join(messages)

    def add_error(self, error: BaseException) -> None:
        """Record another lookup error."""
        self.errors.append(error)

    def is_empty(self) -> bool:
        """Return True if no errors have been recorded."""
        return not self.errors


class ResourceLookupError(Exception):
    """An error looking up a property of an object."""

    def __init__(self, object_type: str, object_id: str, object_property: str) -> None:
        super().__init__(object_type, object_id, object_property)
        self.object_type = object_type
        self.object_id = object_id
        self.object_property = object_property

    def __str__(self) -> str:
        return (
            f"Failed to look up {self.object_property} for {self.object_type} "
            f"with id {self.object_id}."
        )


class CouldNotMeetASGCapacityError(Exception):
    """An auto scaling group did not reach its desired capacity."""

    def __init__(self, asg_name: str, message: str) -> None:
        super().__init__(asg_name, message)
        self.asg_name = asg_name
        self.message = message

    def __str__(self) -> str:
        return f"Could not reach desired capacity of ASG {self.asg_name}: {self.message}"