"""treetracr: dependency analysis for JavaScript/TypeScript source trees."""

__version__ = "0.3.0"
