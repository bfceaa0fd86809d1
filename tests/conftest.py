"""Shared fixtures: a sample user, its field set, and clean logging/settings state."""
import logging
from dataclasses import dataclass, field

import pytest
import structlog

from fieldsafe.config import get_settings
from fieldsafe.logging import LoggerRegistry
from fieldsafe.validation import (
    CpfCnpj,
    Email,
    Field,
    FieldSet,
    Match,
    Max,
    Min,
    OneOf,
    Phone,
    PostalCode,
    Required,
    RequiredUnless,
    StrongPassword,
    UUIDString,
)
from fieldsafe.validation.patterns import ADDRESS_NUMBER


@dataclass
class Address:
    street: str = "Praça Coronel Ernesto Muniz Barreto"
    number: str = "15"
    postal_code: str = "49750-970"
    neighborhood: str = "brotherhood"
    city: str = ""
    state: str = ""


@dataclass
class SampleUser:
    id: str = "f51abc35-4aa1-439b-a985-6d56439901d9"
    name: str = "some random name rodriguez"
    email: str = "user@user.com"
    phone: str = "+55 99988-7766"
    cpf_cnpj: str = "85.200.013/0001-67"
    password: str = "^123!q@w#e4R5T6Y$"
    age: int = 25
    job: str = "software developer"
    address: Address = field(default_factory=Address)


JOBS = [
    "software developer", "designer", "devops engineer", "po", "techlead", "scrum master",
    "ceo", "marketing", "sales", "cs", "spider-man", "",
]


def user_fields(user: SampleUser) -> FieldSet:
    return FieldSet([
        Field("id", user.id, [Required(), UUIDString()]),
        Field("name", user.name, [Required(), Max(128), Min(3)]),
        Field("email", user.email, [Email(), RequiredUnless(user.cpf_cnpj, user.phone)]),
        Field("phone", user.phone, [Phone(), RequiredUnless(user.email, user.cpf_cnpj)]),
        Field("cpf/cnpj", user.cpf_cnpj, [CpfCnpj(), RequiredUnless(user.email, user.phone)]),
        Field("password", user.password, [Required(), StrongPassword()]),
        Field("age", user.age, [Min(18), Max(60)]),
        Field("job", user.job, [OneOf(JOBS)]),
        Field("address_street", user.address.street, [Required(), Max(128)]),
        Field("address_number", user.address.number, [Required(), Match(ADDRESS_NUMBER)]),
        Field("address_neighborhood", user.address.neighborhood, [Required(), Max(128)]),
        Field("address_city", user.address.city, [RequiredUnless(user.address.postal_code), Max(128)]),
        Field("address_state", user.address.state, [RequiredUnless(user.address.postal_code), Max(2)]),
        Field("address_postal_code", user.address.postal_code, [PostalCode()]),
    ])


@pytest.fixture
def sample_user() -> SampleUser:
    return SampleUser()


@pytest.fixture
def build_user_fields():
    return user_fields


@pytest.fixture(autouse=True)
def clean_state():
    """Fresh settings and logging configuration for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    library_logger = logging.getLogger("fieldsafe")
    library_logger.handlers = []
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
