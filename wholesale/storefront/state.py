# wholesale/storefront/state.py
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from wholesale.storefront.storage import StoragePort

StateT = TypeVar("StateT", bound=BaseModel)


class PersistedStore(Generic[StateT]):
    """
    Base for client state containers.

    - `key`: namespace the state is persisted under.
    - `state_model`: pydantic model describing the whole state.

    Construction loads the persisted state (a payload that no longer
    validates raises pydantic.ValidationError; there is no migration).
    Subclasses mutate only through `_commit`, which saves immediately.
    """

    key: ClassVar[str]
    state_model: ClassVar[type[BaseModel]]

    def __init__(self, storage: StoragePort):
        self._storage = storage
        self._state: StateT = self.initial_state()
        data = storage.load(self.key)
        if data is not None:
            self._state = self.state_model.model_validate(data)

    def initial_state(self) -> StateT:
        return self.state_model()

    @property
    def state(self) -> StateT:
        """A copy of the current state; mutating it has no effect on the store."""
        return self._state.model_copy(deep=True)

    def _commit(self, state: StateT) -> None:
        self._state = state
        self._storage.save(self.key, state.model_dump(mode="json"))

    def reset(self) -> None:
        """Back to the initial value and drop the persisted copy (test teardown)."""
        self._state = self.initial_state()
        self._storage.remove(self.key)
