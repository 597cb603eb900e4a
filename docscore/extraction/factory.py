from docscore.config.settings import Settings
from docscore.extraction.base import BaseFieldExtractor
from docscore.extraction.example_extractor import ExampleFieldExtractor


class FieldExtractorFactory:
    """Creates the field extractor named in settings."""

    ADAPTERS: dict[str, type[BaseFieldExtractor]] = {
        "example": ExampleFieldExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseFieldExtractor:
        name = settings.field_extractor.lower()
        adapter_cls = cls.ADAPTERS.get(name)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown field extractor '{name}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
