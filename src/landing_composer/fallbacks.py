from __future__ import annotations

import copy
from typing import Any, Mapping, Protocol

from .locales import Locale

DEFAULT_FALLBACKS: Mapping[Locale, Mapping[str, Mapping[str, Any]]] = {
    "es": {
        "hero": {
            "kicker": "AGENCIA CREATIVA & TECH",
            "headline": "Diseño sin\nlímites",
            "tagline": "UX/UI – Branding – Desarrollo Web",
            "media": {
                "kind": "image",
                "src": "/images/landing/hero-desktop.webp",
                "alt": "Composición abstracta en tonos oscuros",
                "priority": True,
            },
            "align": "start",
        },
        "studioIntro": {
            "kicker": "Estudio",
            "title": "Construimos marcas digitales que se sienten vivas",
            "body": "Somos un equipo pequeño de diseño y desarrollo. Acompañamos cada proyecto desde la idea hasta el lanzamiento.",
            "cta": {"label": "Conoce el estudio", "href": "/es/contacto"},
        },
        "wordmarkOffset": {
            "word": "CREAMOS",
            "media": {"kind": "image", "src": "/images/landing/wordmark.webp", "alt": "Textura del estudio"},
        },
        "capabilities": {
            "header": {
                "headline": "Capacidades",
                "aside": "Todo lo que necesitas para lanzar y hacer crecer tu presencia digital.",
            },
            "items": [
                {"title": "Branding", "description": "Identidad visual, tono y sistemas de marca."},
                {"title": "Diseño UX/UI", "description": "Interfaces claras, accesibles y medibles."},
                {"title": "Desarrollo Web", "description": "Sitios rápidos, seguros y fáciles de editar."},
                {"title": "E-Commerce", "description": "Tiendas listas para vender desde el día uno."},
            ],
        },
        "bigStatement": {
            "left": {"lines": ["HACEMOS", "QUE", "PASE"], "ariaLabel": "Hacemos que pase"},
            "right": {
                "kicker": "Manifiesto",
                "headline": "Cada pixel tiene un propósito",
                "copy": "Diseñamos con intención y desarrollamos con cuidado para que tu marca destaque.",
            },
            "layout": {"container": "2xl", "reverse": False, "bleedY": False},
        },
        "value-grid": {
            "title": ["DISEÑO", "SIN LÍMITES"],
            "cards": [
                {
                    "title": "De idea a realidad",
                    "body": "Convertimos tu idea en un producto digital listo para el mercado.",
                },
                {
                    "title": "Diseño UI/UX Intuitivo",
                    "body": "Experiencias simples que guían a tus usuarios hacia la acción.",
                    "widget": {
                        "kind": "cms",
                        "title": "CMS",
                        "items": [
                            {"label": "Contenido", "icon": "/icons/cms/content.svg"},
                            {"label": "Blog", "icon": "/icons/cms/blog.svg"},
                            {"label": "Productos", "icon": "/icons/cms/products.svg"},
                        ],
                    },
                },
                {
                    "title": "Responsivo",
                    "body": "Se ve y funciona bien en cualquier pantalla.",
                    "image": {"src": "/images/landing/responsive.webp", "alt": "Sitio en móvil y escritorio"},
                },
                {
                    "title": "Optimización Total",
                    "body": "Rendimiento, SEO y accesibilidad desde el primer día.",
                    "image": {"src": "/images/landing/performance.webp", "alt": "Indicadores de rendimiento"},
                },
            ],
        },
        "stack-grid": {
            "groups": [
                {
                    "title": "Frontend",
                    "items": [
                        {"label": "Next.js", "icon": "/logos/stack/nextjs.svg", "alt": "Logo de Next.js"},
                        {"label": "Tailwind", "icon": "/logos/stack/tailwind.svg", "alt": "Logo de Tailwind CSS"},
                    ],
                },
                {
                    "title": "Backend",
                    "items": [
                        {
                            "label": "Python",
                            "icon": "/logos/stack/python.svg",
                            "alt": "Logo de Python",
                            "description": "APIs y automatización",
                        },
                        {"label": "PostgreSQL", "icon": "/logos/stack/postgresql.svg", "alt": "Logo de PostgreSQL"},
                    ],
                },
            ],
        },
        "message-bar": {
            "textParts": [
                {"text": "Diseño", "highlight": True},
                {"text": "Desarrollo"},
                {"text": "Estrategia"},
            ],
            "separator": " • ",
            "align": "center",
        },
        "pricing": {
            "heading": {"titleLines": ["Elige tu Plan,", "Despega", "HOY"]},
            "aside": [
                "Precios claros, sin sorpresas.",
                {
                    "type": "p",
                    "children": [
                        {"text": "Todos los planes incluyen "},
                        {"text": "hosting por un año", "strong": True},
                    ],
                },
            ],
            "plans": [
                {
                    "id": "landing",
                    "name": "Landing",
                    "price": {"amount": "S/ 1,890", "period": "único"},
                    "features": ["Una página", "Formulario de contacto", "SEO básico"],
                    "cta": {"label": "Empezar", "href": "/es/contacto"},
                },
                {
                    "id": "website",
                    "name": "Website",
                    "price": {"amount": "S/ 3,490", "period": "único"},
                    "features": ["Hasta 6 páginas", "CMS", "SEO avanzado"],
                    "cta": {"label": "Empezar", "href": "/es/contacto"},
                    "badge": "Popular",
                },
                {
                    "id": "custom",
                    "name": "A medida",
                    "price": "A medida",
                    "features": ["Alcance personalizado", "Integraciones", "Soporte dedicado"],
                    "cta": {"label": "Hablemos", "href": "mailto:hola@example.com"},
                },
            ],
            "disclaimer": "Precios en soles, no incluyen IGV.",
        },
        "cta-minimal": {
            "title": "¿Listo para algo personalizado?",
            "action": {"label": "Habla con nosotros", "href": "/es/contacto"},
            "align": "center",
        },
        "faq": {
            "title": "Preguntas frecuentes",
            "items": [
                {
                    "question": "¿Cuánto tarda un proyecto?",
                    "answer": "Una landing toma de 2 a 3 semanas; un sitio completo entre 4 y 8 semanas.",
                },
                {
                    "question": "¿Puedo editar el contenido yo mismo?",
                    "answer": "Sí. Los planes Website y superiores incluyen un CMS fácil de usar.",
                },
            ],
        },
        "interactive-3d": {
            "eyebrow": "Experimenta",
            "headline": "Interfaces que responden a ti",
        },
        "service": {
            "kind": "service",
            "header": {"title": "Servicio", "subtitle": "Cuéntanos qué necesitas y armamos una propuesta."},
            "featuresLeft": ["Diagnóstico inicial", "Propuesta a medida"],
            "featuresRight": ["Diseño y desarrollo", "Acompañamiento post lanzamiento"],
            "tags": ["Diseño", "Desarrollo"],
        },
    },
    "en": {
        "hero": {
            "kicker": "CREATIVE & TECH AGENCY",
            "headline": "Design without\nlimits",
            "tagline": "UX/UI – Branding – Web Development",
            "media": {
                "kind": "image",
                "src": "/images/landing/hero-desktop.webp",
                "alt": "Abstract composition in dark tones",
                "priority": True,
            },
            "align": "start",
        },
        "studioIntro": {
            "kicker": "Studio",
            "title": "We build digital brands that feel alive",
            "body": "We are a small design and engineering team. We stay with every project from idea to launch.",
            "cta": {"label": "Meet the studio", "href": "/en/contact"},
        },
        "wordmarkOffset": {
            "word": "WE CREATE",
            "media": {"kind": "image", "src": "/images/landing/wordmark.webp", "alt": "Studio texture"},
        },
        "capabilities": {
            "header": {
                "headline": "Capabilities",
                "aside": "Everything you need to launch and grow your digital presence.",
            },
            "items": [
                {"title": "Branding", "description": "Visual identity, voice and brand systems."},
                {"title": "UX/UI Design", "description": "Clear, accessible and measurable interfaces."},
                {"title": "Web Development", "description": "Fast, secure sites that are easy to edit."},
                {"title": "E-Commerce", "description": "Stores ready to sell from day one."},
            ],
        },
        "bigStatement": {
            "left": {"lines": ["WE", "MAKE IT", "HAPPEN"], "ariaLabel": "We make it happen"},
            "right": {
                "kicker": "Manifesto",
                "headline": "Every pixel has a purpose",
                "copy": "We design with intent and build with care so your brand stands out.",
            },
            "layout": {"container": "2xl", "reverse": False, "bleedY": False},
        },
        "value-grid": {
            "title": ["DESIGN", "WITHOUT LIMITS"],
            "cards": [
                {
                    "title": "From idea to reality",
                    "body": "We turn your idea into a market-ready digital product.",
                },
                {
                    "title": "Intuitive UI/UX Design",
                    "body": "Simple experiences that guide your users to act.",
                    "widget": {
                        "kind": "cms",
                        "title": "CMS",
                        "items": [
                            {"label": "Content", "icon": "/icons/cms/content.svg"},
                            {"label": "Blog", "icon": "/icons/cms/blog.svg"},
                            {"label": "Products", "icon": "/icons/cms/products.svg"},
                        ],
                    },
                },
                {
                    "title": "Responsive",
                    "body": "Looks and works great on any screen.",
                    "image": {"src": "/images/landing/responsive.webp", "alt": "Site on mobile and desktop"},
                },
                {
                    "title": "Fully Optimized",
                    "body": "Performance, SEO and accessibility from day one.",
                    "image": {"src": "/images/landing/performance.webp", "alt": "Performance indicators"},
                },
            ],
        },
        "stack-grid": {
            "groups": [
                {
                    "title": "Frontend",
                    "items": [
                        {"label": "Next.js", "icon": "/logos/stack/nextjs.svg", "alt": "Next.js logo"},
                        {"label": "Tailwind", "icon": "/logos/stack/tailwind.svg", "alt": "Tailwind CSS logo"},
                    ],
                },
                {
                    "title": "Backend",
                    "items": [
                        {
                            "label": "Python",
                            "icon": "/logos/stack/python.svg",
                            "alt": "Python logo",
                            "description": "APIs and automation",
                        },
                        {"label": "PostgreSQL", "icon": "/logos/stack/postgresql.svg", "alt": "PostgreSQL logo"},
                    ],
                },
            ],
        },
        "message-bar": {
            "textParts": [
                {"text": "Design", "highlight": True},
                {"text": "Development"},
                {"text": "Strategy"},
            ],
            "separator": " • ",
            "align": "center",
        },
        "pricing": {
            "heading": {"titleLines": ["Pick your Plan,", "Take off", "TODAY"]},
            "aside": [
                "Clear pricing, no surprises.",
                {
                    "type": "p",
                    "children": [
                        {"text": "Every plan includes "},
                        {"text": "one year of hosting", "strong": True},
                    ],
                },
            ],
            "plans": [
                {
                    "id": "landing",
                    "name": "Landing",
                    "price": {"amount": "S/ 1,890", "period": "one-time"},
                    "features": ["Single page", "Contact form", "Basic SEO"],
                    "cta": {"label": "Get started", "href": "/en/contact"},
                },
                {
                    "id": "website",
                    "name": "Website",
                    "price": {"amount": "S/ 3,490", "period": "one-time"},
                    "features": ["Up to 6 pages", "CMS", "Advanced SEO"],
                    "cta": {"label": "Get started", "href": "/en/contact"},
                    "badge": "Popular",
                },
                {
                    "id": "custom",
                    "name": "Custom",
                    "price": "Custom quote",
                    "features": ["Tailored scope", "Integrations", "Dedicated support"],
                    "cta": {"label": "Let's talk", "href": "mailto:hello@example.com"},
                },
            ],
            "disclaimer": "Prices in PEN, taxes not included.",
        },
        "cta-minimal": {
            "title": "Ready for something custom?",
            "action": {"label": "Talk to us", "href": "/en/contact"},
            "align": "center",
        },
        "faq": {
            "title": "Frequently asked questions",
            "items": [
                {
                    "question": "How long does a project take?",
                    "answer": "A landing page takes 2 to 3 weeks; a full website between 4 and 8 weeks.",
                },
                {
                    "question": "Can I edit the content myself?",
                    "answer": "Yes. Website plans and above include an easy to use CMS.",
                },
            ],
        },
        "interactive-3d": {
            "eyebrow": "Experience",
            "headline": "Interfaces that respond to you",
        },
        "service": {
            "kind": "service",
            "header": {"title": "Service", "subtitle": "Tell us what you need and we will put a proposal together."},
            "featuresLeft": ["Initial assessment", "Tailored proposal"],
            "featuresRight": ["Design and development", "Post-launch support"],
            "tags": ["Design", "Development"],
        },
    },
}


class FallbackMissingError(LookupError):
    """No default payload exists for a (kind, locale) pair."""


class LocaleFallbackStore(Protocol):
    def get(self, kind: str, locale: Locale) -> Any:
        ...


class StaticFallbackStore:
    def __init__(self, defaults: Mapping[str, Mapping[str, Any]] = DEFAULT_FALLBACKS) -> None:
        self._defaults = defaults

    def get(self, kind: str, locale: Locale) -> Any:
        try:
            payload = self._defaults[locale][kind]
        except KeyError as exc:
            raise FallbackMissingError(f"No fallback content for {kind!r} in locale {locale!r}") from exc
        # Callers own what they receive.
        return copy.deepcopy(payload)

    def kinds(self, locale: Locale) -> frozenset[str]:
        return frozenset(self._defaults.get(locale, {}))


DEFAULT_FALLBACK_STORE = StaticFallbackStore()


def fallback(kind: str, locale: Locale) -> Any:
    """Default payload for ``kind`` in ``locale`` from the built-in store."""
    return DEFAULT_FALLBACK_STORE.get(kind, locale)


__all__ = [
    "DEFAULT_FALLBACKS",
    "DEFAULT_FALLBACK_STORE",
    "FallbackMissingError",
    "LocaleFallbackStore",
    "StaticFallbackStore",
    "fallback",
]
