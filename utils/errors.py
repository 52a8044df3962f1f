from typing import Any, Optional


class CheckoutAutomationError(Exception):
    """
    Base class for failures raised by the page objects, data generators and workflow.
    """


class NavigationError(CheckoutAutomationError):
    """
    The target route failed to load within the navigation timeout.
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to navigate to {url}: {reason}")


class ElementNotFoundError(CheckoutAutomationError):
    """
    An element never reached the required state within the timeout.
    """

    def __init__(self, selector: str, state: str, timeout: int):
        self.selector = selector
        self.state = state
        self.timeout = timeout
        super().__init__(f"Element {selector} did not become {state} within {timeout} ms")


class NotInteractableError(CheckoutAutomationError):
    """
    An element was located but the action on it could not be performed within the timeout.
    """

    def __init__(self, selector: str, action: str, timeout: int):
        self.selector = selector
        self.action = action
        self.timeout = timeout
        super().__init__(f"Could not {action} element {selector} within {timeout} ms")


class PageAssertionError(AssertionError):
    """
    An observed value on the page does not match the expected contract.

    Subclasses AssertionError so pytest reports it as a test failure rather than an error.
    """

    def __init__(self, description: str, expected: Any, actual: Any = None, details: Optional[str] = None):
        self.description = description
        self.expected = expected
        self.actual = actual
        self.details = details
        message = f"{description}: expected {expected!r}, actual {actual!r}"
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class SamplingError(CheckoutAutomationError, ValueError):
    """
    A product sample could not be drawn from the catalog.
    """


class UnknownProductError(KeyError):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Unknown product id: {product_id}")


class WorkflowError(CheckoutAutomationError):
    """
    The checkout workflow was asked to take an edge that does not exist from its current state.
    """

    def __init__(self, state: Any, action: Any):
        self.state = state
        self.action = action
        super().__init__(f"No '{getattr(action, 'value', action)}' transition from state "
                         f"'{getattr(state, 'value', state)}'")
