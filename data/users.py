"""Sauce Demo accounts and the login errors the application shows for them."""

from dataclasses import dataclass
from enum import Enum

SHARED_PASSWORD = 'secret_sauce'


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str = SHARED_PASSWORD


class AccountKind(Enum):
    STANDARD = 'standard'
    LOCKED_OUT = 'locked_out'
    PROBLEM = 'problem'
    PERFORMANCE_GLITCH = 'performance_glitch'
    VISUAL = 'visual'
    ERROR = 'error'


STANDARD_USER = Credentials('standard_user')
LOCKED_OUT_USER = Credentials('locked_out_user')
PROBLEM_USER = Credentials('problem_user')
PERFORMANCE_GLITCH_USER = Credentials('performance_glitch_user')
VISUAL_USER = Credentials('visual_user')
ERROR_USER = Credentials('error_user')

ACCOUNTS = {
    AccountKind.STANDARD: STANDARD_USER,
    AccountKind.LOCKED_OUT: LOCKED_OUT_USER,
    AccountKind.PROBLEM: PROBLEM_USER,
    AccountKind.PERFORMANCE_GLITCH: PERFORMANCE_GLITCH_USER,
    AccountKind.VISUAL: VISUAL_USER,
    AccountKind.ERROR: ERROR_USER,
}

# Every account except the locked-out one reaches the inventory
CAN_SIGN_IN = frozenset(kind for kind in AccountKind if kind is not AccountKind.LOCKED_OUT)

LOCKED_OUT_ERROR = 'Epic sadface: Sorry, this user has been locked out.'
INVALID_CREDENTIALS_ERROR = 'Epic sadface: Username and password do not match any user in this service'
USERNAME_REQUIRED_ERROR = 'Epic sadface: Username is required'
PASSWORD_REQUIRED_ERROR = 'Epic sadface: Password is required'

LOGIN_ERRORS = {
    'locked_out': (LOCKED_OUT_USER, LOCKED_OUT_ERROR),
    'wrong_username': (Credentials('HAHAHA'), INVALID_CREDENTIALS_ERROR),
    'wrong_password': (Credentials('standard_user', '12345'), INVALID_CREDENTIALS_ERROR),
    'empty_username_password': (Credentials('', ''), USERNAME_REQUIRED_ERROR),
    'empty_password': (Credentials('standard_user', ''), PASSWORD_REQUIRED_ERROR),
}
