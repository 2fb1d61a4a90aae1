"""Proveedor Faker con áreas funcionales para nombrar unidades de negocio."""

from __future__ import annotations

from faker.providers import BaseProvider


class JobAreaProvider(BaseProvider):
    job_areas = (
        "Solutions",
        "Program",
        "Brand",
        "Security",
        "Research",
        "Marketing",
        "Directives",
        "Implementation",
        "Integration",
        "Functionality",
        "Response",
        "Paradigm",
        "Tactics",
        "Identity",
        "Markets",
        "Group",
        "Division",
        "Applications",
        "Optimization",
        "Operations",
        "Infrastructure",
        "Intranet",
        "Communications",
        "Web",
        "Branding",
        "Quality",
        "Assurance",
        "Mobility",
        "Accounts",
        "Data",
        "Creative",
        "Configuration",
        "Accountability",
        "Interactions",
        "Factors",
        "Usability",
        "Metrics",
    )

    def job_area(self) -> str:
        return self.random_element(self.job_areas)
