"""Small design-pattern building blocks: a user and group registry with a shell, type lists and maps, mixins, an event log, report builders, an adaptive set and expression trees."""

__version__ = "0.1.0"