"""Seed-and-query sequence run once at startup."""

from __future__ import annotations

from enum import Enum

from loguru import logger

from customers_repo import Customer, CustomerRepository

RULE = "-------------------------------"


class RunnerState(str, Enum):
    START = "START"
    CLEARED = "CLEARED"
    SEEDED = "SEEDED"
    QUERIED = "QUERIED"
    DONE = "DONE"


_ORDER = list(RunnerState)


class CustomerDemoRunner:
    """Clear the collection, insert two customers and log three lookups.

    The steps run strictly in order and exactly once. Nothing is retried:
    any error from the repository propagates to the caller.
    """

    def __init__(self, repository: CustomerRepository) -> None:
        self.repository = repository
        self.state = RunnerState.START

    def _advance(self, new_state: RunnerState) -> None:
        if _ORDER.index(new_state) != _ORDER.index(self.state) + 1:
            raise RuntimeError(f"Cannot move runner from {self.state.value} to {new_state.value}")
        logger.debug("Runner {old} -> {new}", old=self.state.value, new=new_state.value)
        self.state = new_state

    async def run(self) -> None:
        repository = self.repository

        await repository.delete_all()
        self._advance(RunnerState.CLEARED)

        # save a couple of customers
        await repository.save(Customer(first_name="Alice", last_name="Smith"))
        await repository.save(Customer(first_name="Bob", last_name="Smith"))
        self._advance(RunnerState.SEEDED)

        logger.debug("Customers found with findAll():")
        logger.debug(RULE)
        async for customer in repository.find_all():
            logger.debug("{}", customer)

        logger.debug("Customer found with findByFirstName('Alice'):")
        logger.debug(RULE)
        alice = await repository.find_by_first_name("Alice")
        logger.debug("{}", alice if alice is not None else "No customer found")

        logger.debug("Customers found with findByLastName('Smith'):")
        logger.debug(RULE)
        async for customer in repository.find_by_last_name("Smith"):
            logger.debug("{}", customer)
        self._advance(RunnerState.QUERIED)

        self._advance(RunnerState.DONE)


async def run(repository: CustomerRepository) -> CustomerDemoRunner:
    runner = CustomerDemoRunner(repository)
    await runner.run()
    return runner
