"""Interpretation catalog of the IL (Wonderlic style) aptitude test.

Bands are set on the percentage of correct answers. On the 20-item form the
cut points fall at 7 and 14 correct answers.
"""

from typing import Tuple

from psychometrics.catalogs.base import Band

CATALOG_VERSION = "il-1.0"


class AptitudeBand(Band):
    """Aptitude band with the capabilities it implies."""

    summary: str
    capabilities: Tuple[str, ...]


BANDS: Tuple[AptitudeBand, ...] = (
    AptitudeBand(
        code="ALTO",
        label="Alto",
        min_score=70,
        min_exclusive=True,
        description="Nivel de inteligencia laboral superior al promedio",
        summary="Alta capacidad de razonamiento y rapidez mental",
        characteristics=(
            "Excelente capacidad de análisis y resolución de problemas",
            "Aprende rápidamente nuevos conceptos y habilidades",
            "Se desempeña bien en roles de alta complejidad",
            "Puede sobresalir en posiciones de liderazgo y toma de decisiones",
        ),
        capabilities=(
            "Excelente capacidad para resolver problemas complejos",
            "Alta rapidez en el procesamiento de información",
            "Buen razonamiento lógico, numérico y verbal",
            "Capacidad para aprender rápidamente nuevas tareas",
            "Buen desempeño bajo presión de tiempo",
        ),
        recommendations=(
            "Apto para roles que requieren análisis complejo y toma de decisiones rápidas",
            "Puede manejar múltiples tareas simultáneamente",
            "Capacidad para resolver problemas no estructurados",
            "Adecuado para posiciones de liderazgo técnico o estratégico",
        ),
    ),
    AptitudeBand(
        code="MEDIO",
        label="Medio",
        min_score=35,
        min_exclusive=True,
        description="Nivel de inteligencia laboral promedio",
        summary="Capacidad promedio para el razonamiento y comprensión",
        characteristics=(
            "Capacidad adecuada para resolver problemas cotidianos",
            "Puede manejar tareas de complejidad moderada",
            "Se adapta bien a roles con responsabilidades definidas",
            "Buen balance entre habilidades prácticas y conceptuales",
        ),
        capabilities=(
            "Capacidad adecuada para resolver problemas rutinarios",
            "Buen seguimiento de instrucciones claras",
            "Razonamiento suficiente para tareas estructuradas",
            "Puede aprender con capacitación apropiada",
        ),
        recommendations=(
            "Apto para roles operativos y técnicos con procedimientos definidos",
            "Beneficiaría de capacitación específica para tareas complejas",
            "Puede requerir más tiempo para procesos de aprendizaje",
            "Adecuado para posiciones con supervisión y guías claras",
        ),
    ),
    AptitudeBand(
        code="BAJO",
        label="Bajo",
        description="Nivel de inteligencia laboral por debajo del promedio",
        summary="Dificultad para resolver problemas o seguir instrucciones complejas",
        characteristics=(
            "Puede requerir más tiempo para procesar información compleja",
            "Se desempeña mejor en tareas rutinarias y estructuradas",
            "Beneficia de instrucciones claras y paso a paso",
            "Puede necesitar supervisión más cercana",
        ),
        capabilities=(
            "Puede presentar dificultades con tareas que requieren razonamiento abstracto",
            "Necesita instrucciones muy claras y estructuradas",
            "Puede requerir más tiempo para procesar información",
            "Mejor desempeño en tareas simples y repetitivas",
        ),
        recommendations=(
            "Apto para roles operativos simples con procedimientos muy claros",
            "Requiere capacitación intensiva y supervisión cercana",
            "Puede beneficiarse de instrucciones paso a paso",
            "Considerar asignación a tareas con baja complejidad cognitiva",
            "Evaluar si requiere apoyo adicional para cumplir con los requisitos del puesto",
        ),
    ),
)
