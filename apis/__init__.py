# Flake8: noqa
from .cep_api_client import CepAPIClient
