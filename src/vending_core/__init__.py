"""
Core Logic Module
Inventory, Wallet, State Machine and Session Controller
"""

from .inventory import Category, Inventory, Item, SEED_CATALOG
from .wallet import Wallet
from .state_machine import StateMachine, SessionState, MenuOption
from .session import SessionController

__all__ = ['Category', 'Inventory', 'Item', 'SEED_CATALOG', 'Wallet',
           'StateMachine', 'SessionState', 'MenuOption', 'SessionController']
