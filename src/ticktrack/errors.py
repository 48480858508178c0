# SPDX-License-Identifier: MIT


class TicktrackError(Exception):
    pass


class PersistenceError(TicktrackError):
    pass


class PersistenceLoadError(PersistenceError):
    pass


class PersistenceSaveError(PersistenceError):
    pass


class DuplicateEntryIdError(TicktrackError):
    def __init__(self, entry_id: str) -> None:
        super().__init__(f"entry id already exists: {entry_id}")
        self.entry_id = entry_id
