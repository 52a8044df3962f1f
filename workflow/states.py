"""
states.py

The checkout workflow state machine.

Transitions are forward-only apart from the explicit cancel edges and the header logout. Product
add/remove actions keep the workflow in the state they are taken from.
"""

from enum import Enum
from types import MappingProxyType

from utils.errors import WorkflowError


class WorkflowState(Enum):
    LOGGED_OUT = 'logged_out'
    INVENTORY = 'inventory'
    CART = 'cart_review'
    SHIPPING_INFO = 'shipping_info'
    ORDER_OVERVIEW = 'order_overview'
    ORDER_COMPLETE = 'order_complete'


class WorkflowAction(Enum):
    LOGIN = 'login'
    ADD_PRODUCTS = 'add_products'
    REMOVE_PRODUCTS = 'remove_products'
    OPEN_CART = 'open_cart'
    CONTINUE_SHOPPING = 'continue_shopping'
    REMOVE_CART_ITEM = 'remove_cart_item'
    CHECKOUT = 'checkout'
    SUBMIT_INFO = 'submit_info'
    CANCEL_INFO = 'cancel_info'
    FINISH = 'finish'
    CANCEL_ORDER = 'cancel_order'
    BACK_HOME = 'back_home'
    LOGOUT = 'logout'


S, A = WorkflowState, WorkflowAction

_EDGES = {
    (S.LOGGED_OUT, A.LOGIN): S.INVENTORY,
    (S.INVENTORY, A.ADD_PRODUCTS): S.INVENTORY,
    (S.INVENTORY, A.REMOVE_PRODUCTS): S.INVENTORY,
    (S.INVENTORY, A.OPEN_CART): S.CART,
    (S.CART, A.CONTINUE_SHOPPING): S.INVENTORY,
    (S.CART, A.REMOVE_CART_ITEM): S.CART,
    (S.CART, A.CHECKOUT): S.SHIPPING_INFO,
    (S.SHIPPING_INFO, A.SUBMIT_INFO): S.ORDER_OVERVIEW,
    (S.SHIPPING_INFO, A.CANCEL_INFO): S.CART,
    (S.ORDER_OVERVIEW, A.FINISH): S.ORDER_COMPLETE,
    (S.ORDER_OVERVIEW, A.CANCEL_ORDER): S.INVENTORY,
    (S.ORDER_COMPLETE, A.BACK_HOME): S.INVENTORY,
}
# The header menu is on every authenticated page
_EDGES.update({(state, A.LOGOUT): S.LOGGED_OUT for state in S if state is not S.LOGGED_OUT})

TRANSITIONS = MappingProxyType(_EDGES)
del S, A


def next_state(state: WorkflowState, action: WorkflowAction) -> WorkflowState:
    """
    Resolve the state reached by taking ``action`` from ``state``.

    Raises:
        WorkflowError: If the edge does not exist.
    """
    try:
        return TRANSITIONS[(state, action)]
    except KeyError:
        raise WorkflowError(state, action) from None


def allowed_actions(state: WorkflowState) -> list[WorkflowAction]:
    return [action for (source, action) in TRANSITIONS if source is state]
