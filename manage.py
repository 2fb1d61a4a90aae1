#!/usr/bin/env python
"""
- Propósito del módulo: exponer punto de entrada CLI para el proyecto
  ``seedgen`` (principalmente ``generate_seed_data`` y ``test``).
- API pública: función ``main`` invocable desde ``__main__``.
- Flujo de datos: variables de entorno → selección de settings → ejecución de
  ``execute_from_command_line`` con argumentos del sistema.
- Dependencias: ``os``, ``sys`` y ``django.core.management``.
- Riesgos, supuestos, límites: requiere que el entorno virtual tenga Django y
  que ``DJANGO_SETTINGS_MODULE`` apunte a ``seedgen.settings``.
"""
import os
import sys


def main():
    """Ejecuta tareas administrativas de Django.

    Raises:
      ImportError: si Django no está instalado o no se encuentra en ``PYTHONPATH``.

    Ejemplo:
      >>> main()  # doctest: +SKIP
    """
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'seedgen.settings')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
