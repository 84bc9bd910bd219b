"""
Shared payload fixtures for the CEP race tests.

HTTP is never hit: see tests/fakes.py for the session and client doubles.
"""
import pytest


BRASILAPI_PAYLOAD = {
    "cep": "08071072",
    "state": "SP",
    "city": "São Paulo",
    "neighborhood": "Jardim das Camélias",
    "street": "Rua Vicente de Carvalho",
    "service": "open-cep",
}

BRASILAPI_ERROR_PAYLOAD = {
    "name": "CepPromiseError",
    "message": "Todos os serviços de CEP retornaram erro.",
    "type": "service_error",
    "errors": [],
}

VIACEP_PAYLOAD = {
    "cep": "08071-072",
    "logradouro": "Rua Vicente de Carvalho",
    "complemento": "",
    "bairro": "Jardim das Camélias",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


@pytest.fixture
def brasilapi_payload():
    return dict(BRASILAPI_PAYLOAD)


@pytest.fixture
def brasilapi_error_payload():
    return dict(BRASILAPI_ERROR_PAYLOAD)


@pytest.fixture
def viacep_payload():
    return dict(VIACEP_PAYLOAD)
