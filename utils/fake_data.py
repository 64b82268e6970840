import os
from dataclasses import dataclass

from faker import Faker


@dataclass(frozen=True)
class CheckoutRecord:
    """收货人信息，每次运行重新生成"""
    first_name: str
    last_name: str
    postal_code: str


class CheckoutDataFactory:
    def __init__(self, seed=None, locale: str = "en_US"):
        self.faker = Faker(locale)
        if seed is None and os.getenv("FAKER_SEED"):
            seed = int(os.getenv("FAKER_SEED"))
        if seed is not None:
            self.faker.seed_instance(seed)

    def checkout_record(self) -> CheckoutRecord:
        record = CheckoutRecord(first_name=self.faker.first_name(),
                                last_name=self.faker.last_name(),
                                postal_code=self.faker.postcode())
        assert all(vars(record).values()), f"生成的收货人信息存在空值：{record}"
        return record
