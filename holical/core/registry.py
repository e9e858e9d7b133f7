import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Dict, List, Optional, Type

from .aggregation import HolidayRecord
from .holidays import HolidaySource
from ..config import settings

logger = logging.getLogger(__name__)


class SourceRegistry:
    _instance: Optional["SourceRegistry"] = None
    _sources: Dict[str, Type[HolidaySource]] = {}

    def __new__(cls) -> "SourceRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, name: str, source_class: Type[HolidaySource]) -> None:
        if not (isinstance(source_class, type) and issubclass(source_class, HolidaySource)):
            raise ValueError(f"Source {source_class} must inherit from HolidaySource")
        cls._sources[name] = source_class

    @classmethod
    def get_source(cls, name: str) -> Optional[Type[HolidaySource]]:
        return cls._sources.get(name)

    @classmethod
    def list_sources(cls) -> List[str]:
        return list(cls._sources.keys())

    @classmethod
    def create_source(cls, name: str) -> HolidaySource:
        source_class = cls.get_source(name)
        if source_class is None:
            raise ValueError(f"Unknown holiday source: {name}")
        return source_class()

    @classmethod
    def discover_sources(cls, package_path: str = "holical.sources") -> None:
        try:
            package = importlib.import_module(package_path)
        except ImportError:
            logger.warning("Holiday source package %s not found", package_path)
            return

        package_dir = Path(package.__file__).parent

        # Importing a module runs its @register_source decorators
        for _, module_name, _ in pkgutil.iter_modules([str(package_dir)]):
            module_path = f"{package_path}.{module_name}"
            try:
                importlib.import_module(module_path)
            except ImportError as e:
                logger.warning("Skipping holiday source %s: %s", module_path, e)


def register_source(name: str):
    def decorator(cls: Type[HolidaySource]) -> Type[HolidaySource]:
        SourceRegistry.register(name, cls)
        return cls
    return decorator


def get_holidays(country_code: str, year: int, source_name: Optional[str] = None) -> List[HolidayRecord]:
    """Look up holidays through a registered source, discovering sources on first use.

    Without ``source_name`` the configured ``settings.holiday_source`` is used.
    """
    source_name = source_name or settings.holiday_source
    if SourceRegistry.get_source(source_name) is None:
        SourceRegistry.discover_sources()
    source = SourceRegistry.create_source(source_name)
    return source.get_holidays(country_code, year)
