"""Error types raised by branchstack operations.

Every core operation fails fast by raising one of these. The CLI layer is the
only place that turns them into a message and a non-zero exit code.
"""


class BranchStackError(Exception):
    """Base class for all branchstack errors."""


class InvalidCommandError(BranchStackError):
    """The requested command is not one branchstack knows how to run."""

    def __init__(self, command: object) -> None:
        super().__init__(f"invalid command: {command!r}")
        self.command = command


class ArgError(BranchStackError):
    """A command argument has an invalid value."""

    def __init__(self, arg_name: str) -> None:
        super().__init__(f"invalid argument value: {arg_name}")
        self.arg_name = arg_name


class RepositoryError(BranchStackError):
    """An underlying git operation failed."""


class InvalidBranchNameError(BranchStackError):
    """The branch name does not resolve to a local branch."""

    def __init__(self, branch: str) -> None:
        super().__init__(f"invalid branch name: {branch}")
        self.branch = branch


class NoCurrentBranchError(BranchStackError):
    """HEAD is detached or the repository has no branch checked out."""

    def __init__(self) -> None:
        super().__init__("no current branch")


class StackIOError(BranchStackError):
    """The stack file could not be read or written."""


class EmptyStackError(BranchStackError):
    """Tried to pop from an empty stack."""

    def __init__(self) -> None:
        super().__init__("empty stack")


class NoStackEntryError(BranchStackError):
    """A rotation offset points past the end of the stack."""

    def __init__(self, offset: int, size: int) -> None:
        super().__init__(f"no stack entry at offset {offset} (stack has {size} entries)")
        self.offset = offset
        self.size = size
