"""Observer pattern: a news office notifies its customers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Customer(ABC):
    @abstractmethod
    def update(self) -> None:
        """React to a notification."""


def _notification(name: str) -> str:
    message = f"Customer {name} get notification "
    print(message)
    return message


@dataclass
class CustomerA(Customer):
    name: str

    def update(self) -> str:
        """Report the notification and return the reported line."""
        return _notification(self.name)


@dataclass
class CustomerB(Customer):
    name: str

    def update(self) -> str:
        """Report the notification and return the reported line."""
        return _notification(self.name)


@dataclass
class NewsOffice:
    customers: list[Customer] = field(default_factory=list)

    def add_customer(self, customer: Customer) -> None:
        self.customers.append(customer)

    def printing_completed(self) -> None:
        self.notify_all_customers()

    def notify_all_customers(self) -> None:
        for customer in self.customers:
            customer.update()