import os

# Configurações globais de ambiente
SLACK_WEBHOOK_URL = os.getenv("SLACK_WEBHOOK_URL", "")
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "9000"))
HEALTH_PORT = int(os.getenv("HEALTH_PORT", "8080"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Entrega no webhook
WEBHOOK_TIMEOUT_SECONDS = 4
WEBHOOK_CONTENT_TYPE = "application/json"
WEBHOOK_VERIFY_TLS = os.getenv("WEBHOOK_VERIFY_TLS", "true").lower() == "true"

# Rotas
WATCH_PATH = "/watch/checks"
HEALTH_PATH = "/healthz"

# O método é validado pelo próprio handler (405 com corpo fixo),
# então a rota aceita todos os verbos.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

INVALID_METHOD_MESSAGE = "Invalid request method"
BODY_READ_ERROR_MESSAGE = "Error reading request body"
