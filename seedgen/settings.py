"""
- Propósito del módulo: centralizar la configuración del proyecto ``seedgen``
  para que Django se inicialice sin base de datos y los generadores lean sus
  parámetros desde un único lugar.
- API pública: constantes como ``INSTALLED_APPS``, ``PASSWORD_HASHERS``,
  ``LOGGING`` y la familia ``SEED_*`` consumida por ``core.conf``.
- Flujo de datos: constantes en Python → ``django.conf.settings`` →
  ``core.conf.SeedSettings.from_settings`` → generadores y comando.
- Dependencias: módulo estándar ``pathlib`` más Django y argon2-cffi (vía
  ``Argon2PasswordHasher``).
- Decisiones clave y trade-offs: no se declara ``DATABASES`` porque la
  herramienta solo escribe archivos; Argon2 queda primero en los hashers para
  que las contraseñas sembradas sean compatibles con el helpdesk.
- Riesgos, supuestos, límites: ``SEED_OUTPUT_DIR`` relativo se resuelve contra
  el directorio de invocación.
- Puntos de extensión: cualquier ``SEED_*`` puede sobreescribirse con
  ``override_settings`` en pruebas o en un settings específico por ambiente.
"""

from pathlib import Path

# Rutas base: punto de referencia para construir paths relativos a todo el proyecto.
BASE_DIR = Path(__file__).resolve().parent.parent

# ⚠️ Clave secreta; la herramienta no firma nada, pero Django exige el valor.
SECRET_KEY = "dev-insecure-change-me"
DEBUG = True
ALLOWED_HOSTS: list[str] = []

# Apps: solo las propias, cada una aporta generadores y pruebas.
INSTALLED_APPS = [
    "core",
    "catalog",
    "accounts",
    "tickets",
]

# Sin persistencia: los datos semilla terminan en archivos JSON/CSV.
DATABASES: dict = {}

# Argon2 primero: es el formato que verifica el helpdesk al iniciar sesión.
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.Argon2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
]

# Idioma y zona: el prefijo telefónico +51 corresponde a Lima.
LANGUAGE_CODE = "es-pe"
TIME_ZONE = "America/Lima"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Logging a consola para seguir el avance del comando.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "[{levelname}] {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}

# ---------------------------------------------------------------------------
# Datos semilla
# ---------------------------------------------------------------------------
# Directorio de salida (relativo al directorio de invocación).
SEED_OUTPUT_DIR = "data"
# Unidades con nombre aleatorio + unidades fijas; la última aporta los técnicos.
SEED_RANDOM_UNITS = 4
SEED_NAMED_UNITS = ["Human Resources", "Information Technologies"]
SEED_USERS_PER_UNIT = 20
SEED_TICKETS = 666
SEED_COMPLAINTS = 123
SEED_EMAIL_DOMAIN = "esprezza.com"
SEED_PHONE_FORMAT = "+51333#######"
# Ventana de fechas: desde N meses atrás hasta hoy.
SEED_WINDOW_MONTHS = 2
SEED_FAKER_LOCALE = "es_ES"
# ``None`` genera datos distintos en cada corrida.
SEED_RANDOM_SEED = None
# ``True`` reproduce el sesgo histórico que nunca elige el último elemento.
SEED_LEGACY_DRAWS = False
SEED_HASH_WORKERS = 4
SEED_PASSWORD_LENGTH = 12
SEED_PASSWORD_PATTERN = "aA0!"
