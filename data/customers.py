"""
customers.py

Synthetic checkout-form data built with Faker.

With a seed the generated customer is a pure function of that seed (for a given Faker release and
locale), which keeps CI runs reproducible. Without one each call draws fresh entropy.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from faker import Faker

from utils.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = 'en_US'


@dataclass(frozen=True)
class CustomerInfo:
    first_name: str
    last_name: str
    postal_code: str
    address: str  # not submitted, kept for log correlation

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def generate_customer(seed: Optional[int] = None, locale: str = DEFAULT_LOCALE) -> CustomerInfo:
    """
    Generate checkout data for one scenario.

    A dedicated Faker instance is created per call so that seeding never touches the shared random state
    other sessions may be using.

    Args:
        seed (Optional[int]): Seed for reproducible data. None means a fresh, non-reproducible customer.
        locale (str): Faker locale.

    Returns:
        CustomerInfo: The generated customer.
    """
    fake = Faker(locale)
    fake.seed_instance(seed if seed is not None else secrets.randbits(64))

    first_name = fake.first_name()
    last_name = fake.last_name()
    customer = CustomerInfo(
        first_name=first_name,
        last_name=last_name,
        postal_code=fake.postcode(),
        address=fake.street_address(),
    )
    logger.info(f"Generated customer {customer.full_name} ({customer.address}, {customer.postal_code})"
                f"{f' from seed {seed}' if seed is not None else ''}")
    return customer


def generate_seeded_customer() -> CustomerInfo:
    """
    Generate the customer for the configured SEED (12345 unless overridden).
    """
    return generate_customer(get_settings().seed)
