"""Error taxonomy for adding a utility.

Fatal errors (PromptInterrupted, MissingSource, FetchError, CopyError) end the
run in the FAILED state. CleanupWarning and InstallError are recorded as
warnings on the outcome and never stop the run.
"""


class AddUtilityError(Exception):
    """Base class for every failure the add workflow knows how to report."""

    fatal: bool = True


class PromptInterrupted(AddUtilityError):
    """User aborted an interactive prompt (Ctrl-C or end of input)."""

    def __init__(self, prompt: str) -> None:
        super().__init__(f"Prompt interrupted: {prompt}")
        self.prompt = prompt


class MissingSource(AddUtilityError):
    """Selected utility has no repository URL yet."""

    def __init__(self, utility_name: str) -> None:
        super().__init__(f"Repository URL is missing for {utility_name}")
        self.utility_name = utility_name


class FetchError(AddUtilityError):
    """git clone of the utility branch failed."""


class CopyError(AddUtilityError):
    """Copying the fetched tree into the destination failed.

    The destination may be left partially populated.
    """


class CleanupWarning(AddUtilityError):
    """An artifact or the temporary clone directory could not be removed."""

    fatal = False


class InstallError(AddUtilityError):
    """Dependency installation failed. The utility files are still in place.

    executed lists the rendered commands that completed before the failure.
    """

    fatal = False

    def __init__(self, message: str, executed: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.executed = executed
