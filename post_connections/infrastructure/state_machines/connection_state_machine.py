"""Connection state machine for debounced connectivity tracking."""

import logging
from enum import Enum, auto
from typing import Dict, Callable

_LOGGER = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Connectivity states."""

    CONNECTED = auto()
    LOST = auto()


class ConnectionEvent(Enum):
    """Request outcomes that drive state transitions."""

    REQUEST_SUCCEEDED = auto()
    REQUEST_FAILED = auto()


class ConnectionStateMachine:
    """State machine for connectivity tracking.

    Valid transitions:
        CONNECTED -> LOST (on REQUEST_FAILED)
        LOST -> CONNECTED (on REQUEST_SUCCEEDED)

    A repeated outcome (REQUEST_FAILED while LOST, REQUEST_SUCCEEDED while
    CONNECTED) is not a transition: transition() returns False and no
    callback fires.

    Example:
        >>> sm = ConnectionStateMachine()
        >>> sm.transition(ConnectionEvent.REQUEST_FAILED)
        True
        >>> sm.transition(ConnectionEvent.REQUEST_FAILED)
        False
        >>> sm.has_lost_connection
        True
    """

    def __init__(self):
        """Initialize state machine in CONNECTED state."""
        self._state = ConnectionState.CONNECTED

        # Callbacks for state changes
        self._on_state_change: Dict[ConnectionState, Callable] = {}

        # Valid transitions: (current_state, event) -> new_state
        self._transitions = {
            (
                ConnectionState.CONNECTED,
                ConnectionEvent.REQUEST_FAILED,
            ): ConnectionState.LOST,
            (
                ConnectionState.LOST,
                ConnectionEvent.REQUEST_SUCCEEDED,
            ): ConnectionState.CONNECTED,
        }

    @property
    def state(self) -> ConnectionState:
        """Get current state."""
        return self._state

    @property
    def is_connected(self) -> bool:
        """Check if currently connected."""
        return self._state == ConnectionState.CONNECTED

    @property
    def has_lost_connection(self) -> bool:
        """Check if connectivity is currently lost."""
        return self._state == ConnectionState.LOST

    def transition(self, event: ConnectionEvent) -> bool:
        """Attempt state transition.

        Args:
            event: Event triggering transition

        Returns:
            True if the state changed, False for a repeated outcome

        Example:
            >>> sm = ConnectionStateMachine()
            >>> sm.transition(ConnectionEvent.REQUEST_SUCCEEDED)
            False
            >>> sm.state.name
            'CONNECTED'
        """
        key = (self._state, event)

        if key not in self._transitions:
            _LOGGER.debug(
                "No transition: %s + %s",
                self._state.name,
                event.name,
            )
            return False

        new_state = self._transitions[key]
        self._change_state(new_state, event)
        return True

    def _change_state(self, new_state: ConnectionState, event: ConnectionEvent):
        """Change to new state and invoke callbacks.

        Args:
            new_state: State to transition to
            event: Event that triggered transition
        """
        old_state = self._state
        self._state = new_state

        _LOGGER.debug(
            "Connection state: %s -> %s (event: %s)",
            old_state.name,
            new_state.name,
            event.name,
        )

        # Invoke state change callback
        if new_state in self._on_state_change:
            try:
                self._on_state_change[new_state]()
            except Exception as err:
                _LOGGER.error("Error in state change callback: %s", err)

    def on_state(self, state: ConnectionState, callback: Callable):
        """Register callback for state entry.

        Args:
            state: State to watch
            callback: Function to call on state entry (no args)

        Example:
            >>> sm = ConnectionStateMachine()
            >>> sm.on_state(ConnectionState.LOST, lambda: print("Lost!"))
        """
        self._on_state_change[state] = callback

    def __str__(self) -> str:
        """String representation."""
        return f"ConnectionStateMachine(state={self._state.name})"

    def __repr__(self) -> str:
        """Developer representation."""
        return f"ConnectionStateMachine(state={self._state!r})"
