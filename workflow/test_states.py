import pytest

from utils.errors import WorkflowError
from workflow.states import TRANSITIONS, WorkflowAction, WorkflowState, allowed_actions, next_state


@pytest.mark.unit
class TestWorkflowStates:

    @pytest.mark.parametrize('state, action, expected', [
        (WorkflowState.LOGGED_OUT, WorkflowAction.LOGIN, WorkflowState.INVENTORY),
        (WorkflowState.INVENTORY, WorkflowAction.ADD_PRODUCTS, WorkflowState.INVENTORY),
        (WorkflowState.INVENTORY, WorkflowAction.OPEN_CART, WorkflowState.CART),
        (WorkflowState.CART, WorkflowAction.CHECKOUT, WorkflowState.SHIPPING_INFO),
        (WorkflowState.SHIPPING_INFO, WorkflowAction.SUBMIT_INFO, WorkflowState.ORDER_OVERVIEW),
        (WorkflowState.SHIPPING_INFO, WorkflowAction.CANCEL_INFO, WorkflowState.CART),
        (WorkflowState.ORDER_OVERVIEW, WorkflowAction.FINISH, WorkflowState.ORDER_COMPLETE),
        (WorkflowState.ORDER_OVERVIEW, WorkflowAction.CANCEL_ORDER, WorkflowState.INVENTORY),
        (WorkflowState.ORDER_COMPLETE, WorkflowAction.BACK_HOME, WorkflowState.INVENTORY),
    ])
    def test_edges(self, state, action, expected):
        assert next_state(state, action) is expected

    @pytest.mark.parametrize('state, action', [
        (WorkflowState.LOGGED_OUT, WorkflowAction.OPEN_CART),
        (WorkflowState.INVENTORY, WorkflowAction.CHECKOUT),
        (WorkflowState.CART, WorkflowAction.FINISH),
        (WorkflowState.ORDER_COMPLETE, WorkflowAction.CANCEL_ORDER),
        (WorkflowState.LOGGED_OUT, WorkflowAction.LOGOUT),
    ])
    def test_missing_edges_raise(self, state, action):
        with pytest.raises(WorkflowError) as exc_info:
            next_state(state, action)

        assert exc_info.value.state is state
        assert exc_info.value.action is action

    def test_logout_from_every_authenticated_state(self):
        for state in WorkflowState:
            if state is not WorkflowState.LOGGED_OUT:
                assert next_state(state, WorkflowAction.LOGOUT) is WorkflowState.LOGGED_OUT

    def test_order_complete_is_reached_only_by_finish(self):
        sources = [key for key, target in TRANSITIONS.items() if target is WorkflowState.ORDER_COMPLETE]

        assert sources == [(WorkflowState.ORDER_OVERVIEW, WorkflowAction.FINISH)]

    def test_allowed_actions(self):
        assert allowed_actions(WorkflowState.LOGGED_OUT) == [WorkflowAction.LOGIN]
        assert set(allowed_actions(WorkflowState.SHIPPING_INFO)) == {
            WorkflowAction.SUBMIT_INFO, WorkflowAction.CANCEL_INFO, WorkflowAction.LOGOUT}

    def test_transitions_are_read_only(self):
        with pytest.raises(TypeError):
            TRANSITIONS[(WorkflowState.LOGGED_OUT, WorkflowAction.FINISH)] = WorkflowState.ORDER_COMPLETE

    def test_module_exports_no_shorthand_aliases(self):
        from workflow import states

        assert not hasattr(states, 'S')
        assert not hasattr(states, 'A')
