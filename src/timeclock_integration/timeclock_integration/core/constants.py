"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CONFIG_LOGIN = "integration_time_clock_primeponto_login"
CONFIG_PASSWORD = "integration_time_clock_primeponto_password"
CONFIG_CONTEXT = "integration_time_clock_primeponto_contexto"
CONFIG_CNPJ_PRIMARY = "integration_time_clock_primeponto_cnpj_primary"
CONFIG_CNPJ_SECONDARY = "integration_time_clock_primeponto_cnpj_secondary"
CONFIG_ALLOWED_AFTER_DATE = "integration_time_clock_primeponto_allowed_after_date"

# Fault text the service returns when the CPF has no contract under the given CNPJ.
NO_CONTRACT_FAULT = "Falha ao executar consulta: Funcionário não possui contrato neste CNPJ"
NO_CONTRACT_MARKER = "nao possui contrato neste cnpj"

DEFAULT_PRIMEPONTO_BASE_URL = "https://srep.primesw.com.br"
DEFAULT_PRIMEPONTO_TIMEOUT = 30
DEFAULT_IMPORT_MAX_WORKERS = 1

FOLHA_NAMESPACE = "http://folha.primews.com.br/"
SOAP_ENV_NAMESPACE = "http://schemas.xmlsoap.org/soap/envelope/"
