"""
State Machine for the vending session

States: AWAITING_CHOICE → EXITED
"""

import logging
from enum import Enum
from typing import Callable, Optional, Dict


class SessionState(Enum):
    """Session states"""
    AWAITING_CHOICE = "awaiting_choice"
    EXITED = "exited"


class MenuOption(Enum):
    """Main menu entries, valued by the number the user types"""
    INSERT_MONEY = 1
    BUY_ITEM = 2
    RETURN_CHANGE = 3
    EXIT = 4


class StateMachine:
    """
    Menu loop state holder

    State Flow:
    1. AWAITING_CHOICE: menu shown, one choice read and dispatched per turn
    2. EXITED: terminal, reached through the Exit option or end of input
    """

    def __init__(self):
        self.state = SessionState.AWAITING_CHOICE
        self.logger = logging.getLogger(__name__)

        # Callbacks
        self.callbacks = {
            SessionState.AWAITING_CHOICE: [],
            SessionState.EXITED: []
        }

    def register_callback(self, state: SessionState, callback: Callable):
        """
        Register callback for state entry

        Args:
            state: State to attach callback to
            callback: Function to call on state entry
        """
        self.callbacks[state].append(callback)
        self.logger.debug("Registered callback for state: %s", state.value)

    def transition_to(self, new_state: SessionState, data: Optional[Dict] = None):
        """
        Transition to new state

        Args:
            new_state: Target state
            data: Optional data to pass to callbacks

        Raises:
            RuntimeError: If the session already exited
        """
        old_state = self.state
        if old_state == SessionState.EXITED:
            raise RuntimeError("Session already exited")

        self.state = new_state

        self.logger.info("State transition: %s → %s", old_state.value, new_state.value)

        # Execute callbacks
        for callback in self.callbacks[new_state]:
            try:
                callback(data)
            except Exception as e:
                self.logger.error("Callback error in %s: %s", new_state.value, e)

    def get_state(self) -> SessionState:
        """Get current state"""
        return self.state

    def is_running(self) -> bool:
        return self.state == SessionState.AWAITING_CHOICE
