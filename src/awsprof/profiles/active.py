"""Active profile indicator and selection."""

import logging
import os
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager

from ..aws.exceptions import ProfileNotFoundError
from ..aws.store import ProfileStore
from ..utils.prompts import Prompter

logger = logging.getLogger(__name__)


class ProfileContext:
    """The process-wide "current profile" environment variable."""

    def __init__(
        self,
        environ: MutableMapping[str, str] | None = None,
        var: str = "AWS_PROFILE",
    ) -> None:
        """Initialize profile context.

        Args:
            environ: Environment mapping (defaults to os.environ)
            var: Name of the variable holding the active profile
        """
        self.environ = os.environ if environ is None else environ
        self.var = var

    def get(self) -> str | None:
        return self.environ.get(self.var) or None

    def set(self, name: str) -> None:
        logger.debug("Setting %s=%s", self.var, name)
        self.environ[self.var] = name

    def clear(self) -> None:
        self.environ.pop(self.var, None)

    @contextmanager
    def cleared(self) -> Iterator[None]:
        """Unset the variable for the duration of the block.

        The previous value is restored however the block exits.
        """
        previous = self.get()
        self.clear()
        try:
            yield
        finally:
            if previous is None:
                self.clear()
            else:
                self.environ[self.var] = previous


class ProfileSelector:
    """Pick and activate a profile."""

    def __init__(self, store: ProfileStore, context: ProfileContext, prompter: Prompter) -> None:
        self.store = store
        self.context = context
        self.prompter = prompter

    def pick(self) -> str | None:
        """Let the user choose among all known profiles.

        Returns:
            Chosen profile name, or None if there are no profiles or the
            menu was cancelled
        """
        names = sorted(self.store.list_profiles())
        if not names:
            return None
        return self.prompter.choose(names, "  Select profile:")

    def set_active(self, name: str | None = None) -> str | None:
        """Activate a profile, asking for one when no name is given.

        Args:
            name: Profile name

        Returns:
            Activated profile name, or None if selection was cancelled

        Raises:
            ProfileNotFoundError: If a given name is not a known profile
        """
        if name is None:
            name = self.pick()
            if name is None:
                return None
        elif not self.store.profile_exists(name):
            raise ProfileNotFoundError("Profile", name)

        self.context.set(name)
        return name
