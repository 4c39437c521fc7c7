from enum import StrEnum


class Environment(StrEnum):
    TEST = "test"
    STAGING = "staging"
    SANDBOX = "sandbox"
    PROD = "prod"


BASE_URLS: dict[Environment, str] = {
    Environment.TEST: "https://api.platform.test.silsistemas.com.br",
    Environment.STAGING: "https://api.platform.staging.silsistemas.com.br",
    Environment.SANDBOX: "https://api.platform.sandbox.silsistemas.com.br",
    Environment.PROD: "https://api.platform.silsistemas.com.br",
}


def get_base_url(environment: Environment) -> str:
    return BASE_URLS[environment]
