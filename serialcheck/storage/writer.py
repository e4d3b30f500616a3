"""
Offline fixture generation.

Run by a maintainer when a version is released, never by automated tests
against a real fixture directory: regenerating a historical fixture from
today's code silently erases the guarantee it exists to provide.

Example:
    from serialcheck import FixtureStore, write_fixture
    from tests.compat.test_trigger_compat import TriggerSubject

    write_fixture(TriggerSubject(), "2.5.0", FixtureStore("tests/compat/fixtures"))
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import FixtureWriteError
from ..core.subject import CompatibilitySubject
from .store import FixtureStore

logger = logging.getLogger(__name__)


def write_fixture(
    subject: CompatibilitySubject,
    version: str,
    store: FixtureStore,
    overwrite: bool = True,
) -> Path:
    """
    Serialize the subject's target object as the fixture for version.

    Produces exactly one file. The target is built once; with overwrite=False
    an existing fixture of the same name is left untouched.

    Raises:
        FixtureWriteError: The fixture already exists and overwrite is False,
            or it could not be encoded or written.
    """
    target = subject.get_target_object()
    if not overwrite and store.exists(version, type(target)):
        path = store.path_for(version, type(target))
        raise FixtureWriteError(
            f"{path} already exists", version=version, path=str(path)
        )
    declared = list(subject.get_versions())
    if version not in declared:
        logger.warning(
            "Writing fixture for version %s, which %s does not declare yet",
            version,
            type(subject).__name__,
        )
    return store.save(version, target)
