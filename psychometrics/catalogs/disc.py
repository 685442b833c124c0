"""Interpretation catalog of the DISC behavioural profile."""

from types import MappingProxyType
from typing import Mapping, Tuple

from psychometrics.models.base import CatalogEntry

CATALOG_VERSION = "disc-1.0"


class DimensionDefinition(CatalogEntry):
    """Names, traits and style texts of one DISC dimension."""

    code: str
    name: str
    description: str
    high_traits: Tuple[str, ...]
    low_traits: Tuple[str, ...]
    profile_description: str
    strengths: Tuple[str, ...]
    growth_areas: Tuple[str, ...]
    style_low: str
    style_medium: str
    style_high: str
    profile_label: str


_DIMENSIONS: Tuple[DimensionDefinition, ...] = (
    DimensionDefinition(
        code="D",
        name="Dominancia",
        description="Mide cómo la persona responde a problemas y desafíos",
        high_traits=("Directo", "Decidido", "Competitivo", "Exigente", "Orientado a resultados", "Asume riesgos"),
        low_traits=("Cooperativo", "Calculador", "Prudente", "Modesto", "Pacífico", "Discreto"),
        profile_description=(
            "Perfil DOMINANTE: Orientado a resultados, decisivo, directo. Busca control y acepta desafíos."
        ),
        strengths=("Toma de decisiones rápidas", "Orientación a resultados", "Aceptación de desafíos", "Liderazgo directo"),
        growth_areas=("Paciencia con procesos lentos", "Escucha activa", "Trabajo en equipo colaborativo"),
        style_low="Prefiere cooperar y evitar confrontaciones",
        style_medium="Balance entre asertividad y cooperación",
        style_high="Directivo, acepta desafíos, busca control",
        profile_label="D - Dominante",
    ),
    DimensionDefinition(
        code="I",
        name="Influencia",
        description="Mide cómo la persona se relaciona e influye en otros",
        high_traits=("Sociable", "Optimista", "Entusiasta", "Persuasivo", "Expresivo", "Confiado"),
        low_traits=("Reflexivo", "Objetivo", "Reservado", "Pesimista", "Controlado", "Escéptico"),
        profile_description=(
            "Perfil INFLUYENTE: Sociable, entusiasta, persuasivo. "
            "Le gusta trabajar con personas y comunicar ideas."
        ),
        strengths=("Comunicación efectiva", "Persuasión", "Optimismo", "Construcción de relaciones"),
        growth_areas=("Atención a detalles", "Seguimiento de tareas", "Análisis crítico antes de decidir"),
        style_low="Prefiere trabajar de forma independiente",
        style_medium="Balance entre interacción social y trabajo individual",
        style_high="Sociable, entusiasta, influyente con otros",
        profile_label="I - Influyente",
    ),
    DimensionDefinition(
        code="S",
        name="Estabilidad",
        description="Mide cómo la persona responde al ritmo y cambios del entorno",
        high_traits=("Paciente", "Leal", "Predecible", "Constante", "Estable", "Buen oyente"),
        low_traits=("Impaciente", "Inquieto", "Impulsivo", "Versátil", "Activo", "Variable"),
        profile_description=(
            "Perfil ESTABLE: Paciente, leal, colaborador. Valora la estabilidad y el trabajo en equipo."
        ),
        strengths=("Paciencia", "Lealtad", "Colaboración", "Estabilidad bajo presión"),
        growth_areas=("Adaptación a cambios rápidos", "Toma de decisiones bajo presión", "Asertividad"),
        style_low="Prefiere variedad y cambio frecuente",
        style_medium="Balance entre estabilidad y adaptabilidad",
        style_high="Paciente, estable, prefiere rutinas predecibles",
        profile_label="S - Estable",
    ),
    DimensionDefinition(
        code="C",
        name="Cumplimiento",
        description="Mide cómo la persona responde a reglas y procedimientos",
        high_traits=("Preciso", "Analítico", "Diplomático", "Sistemático", "Cauteloso", "Detallista"),
        low_traits=("Independiente", "Obstinado", "Directo", "Despreocupado", "Firme", "Testarudo"),
        profile_description=(
            "Perfil CUMPLIDOR: Analítico, preciso, sistemático. "
            "Valora la calidad y el cumplimiento de normas."
        ),
        strengths=("Atención al detalle", "Pensamiento analítico", "Precisión", "Cumplimiento de normas"),
        growth_areas=("Flexibilidad ante cambios", "Delegación de tareas", "Comunicación social"),
        style_low="Flexible, se adapta fácilmente a cambios",
        style_medium="Balance entre estructura y flexibilidad",
        style_high="Analítico, preciso, sigue procedimientos",
        profile_label="C - Cumplidor",
    ),
)

DIMENSIONS: Mapping[str, DimensionDefinition] = MappingProxyType(
    {dimension.code: dimension for dimension in _DIMENSIONS}
)


# ============================================================================
# COMBINED PROFILES
# ============================================================================

COMBINED_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    "DI": "Combinación Dominante-Influyente: Líder inspirador, competitivo y persuasivo.",
    "DC": "Combinación Dominante-Cumplidor: Líder analítico, exigente con resultados de calidad.",
    "DS": "Combinación Dominante-Estable: Líder equilibrado entre acción y colaboración.",
    "ID": "Combinación Influyente-Dominante: Comunicador persuasivo con orientación a resultados.",
    "IS": "Combinación Influyente-Estable: Facilitador social, empático y colaborativo.",
    "IC": "Combinación Influyente-Cumplidor: Comunicador detallista que explica con precisión.",
    "SD": "Combinación Estable-Dominante: Colaborador decidido que equilibra acción y equipo.",
    "SI": "Combinación Estable-Influyente: Cooperador sociable, mediador natural.",
    "SC": "Combinación Estable-Cumplidor: Colaborador meticuloso, confiable y consistente.",
    "CD": "Combinación Cumplidor-Dominante: Perfeccionista orientado a resultados de calidad.",
    "CI": "Combinación Cumplidor-Influyente: Analista persuasivo que comunica datos eficazmente.",
    "CS": "Combinación Cumplidor-Estable: Especialista confiable que sigue procedimientos con paciencia.",
})

GENERIC_COMBINED_DESCRIPTION = "Combinación versátil sin un patrón conductual definido."

WORK_RECOMMENDATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "DI": ("Roles de liderazgo y ventas", "Gestión de equipos", "Presentaciones ejecutivas"),
    "DC": ("Dirección de proyectos técnicos", "Roles de auditoría y control de calidad", "Gestión de operaciones"),
    "DS": ("Supervisión de equipos", "Roles de coordinación", "Gestión de recursos humanos"),
    "ID": ("Ventas y desarrollo de negocios", "Marketing y comunicaciones", "Capacitación"),
    "IS": ("Atención al cliente", "Trabajo social", "Coordinación de equipos"),
    "IC": ("Roles de comunicación técnica", "Capacitación especializada", "Consultoría"),
    "SD": ("Roles operativos con liderazgo", "Coordinación de producción", "Supervisión"),
    "SI": ("Servicio al cliente", "Relaciones públicas", "Facilitación de grupos"),
    "SC": ("Roles administrativos", "Soporte técnico", "Cumplimiento y control"),
    "CD": ("Ingeniería de proyectos", "Control de calidad exigente", "Auditoría"),
    "CI": ("Análisis de datos con presentaciones", "Investigación aplicada", "Consultoría técnica"),
    "CS": ("Roles de compliance", "Administración detallada", "Soporte operativo"),
})

GENERIC_WORK_RECOMMENDATIONS: Tuple[str, ...] = (
    "Roles versátiles que aprovechen múltiples dimensiones",
)

# Paired labels, keyed by the unordered pair of top dimensions
PAIRED_PROFILE_LABELS: Mapping[frozenset, str] = MappingProxyType({
    frozenset("DI"): "DI - Dominante Influyente",
    frozenset("DC"): "DC - Dominante Cumplidor",
    frozenset("IS"): "IS - Influyente Estable",
    frozenset("SC"): "SC - Estable Cumplidor",
})

BALANCED_PROFILE_LABEL = "Balanceado"
BALANCED_STRENGTHS: Tuple[str, ...] = ("Perfil equilibrado en múltiples dimensiones",)

# Number of strengths contributed by each prominent dimension
STRENGTHS_PER_DIMENSION = 2

# Number of traits quoted in each dimension description
TRAITS_PER_DESCRIPTION = 3

# Advice attached to each profile label
PROFILE_ADVICE: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "D - Dominante": (
        "Aproveche su capacidad de tomar decisiones rápidas",
        "Trabaje en ser más paciente con otros",
        "Considere el impacto de sus decisiones en el equipo",
    ),
    "I - Influyente": (
        "Use su carisma para motivar al equipo",
        "Enfóquese en seguir tareas hasta completarlas",
        "Practique la escucha activa",
    ),
    "S - Estable": (
        "Su lealtad y paciencia son muy valoradas",
        "No tema expresar sus opiniones",
        "Adáptese gradualmente a los cambios",
    ),
    "C - Cumplidor": (
        "Su atención al detalle es un gran activo",
        "Confíe más en su intuición ocasionalmente",
        "Sea flexible cuando las circunstancias lo requieran",
    ),
})

GENERIC_PROFILE_ADVICE: Tuple[str, ...] = (
    "Mantenga el balance entre todas las dimensiones",
    "Desarrolle habilidades en áreas menos dominantes",
)
