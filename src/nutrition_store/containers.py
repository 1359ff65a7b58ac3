"""Dependency container wiring for the local document store."""

from dataclasses import dataclass

from nutrition_store.adapters.json_file_storage import JsonFileKeyValueStorage
from nutrition_store.adapters.static_food_catalog import StaticFoodCatalog
from nutrition_store.app_logging import configure_logging
from nutrition_store.config import Settings
from nutrition_store.domain.keys import StorageKeys
from nutrition_store.services.catalog import CatalogService, FoodCatalog
from nutrition_store.services.diary import DiaryService
from nutrition_store.services.documents import DocumentStore
from nutrition_store.services.erase import DataEraser
from nutrition_store.services.foods import CustomFoodStore
from nutrition_store.services.key_value import (
    InMemoryKeyValueStorage,
    KeyValueStorage,
)
from nutrition_store.services.records import DailyRecordStore
from nutrition_store.services.users import UserDirectory


@dataclass
class AppContainer:
    """Holds one isolated session over one storage."""

    settings: Settings
    storage: KeyValueStorage
    keys: StorageKeys
    documents: DocumentStore
    user_directory: UserDirectory
    daily_records: DailyRecordStore
    custom_foods: CustomFoodStore
    catalog_service: CatalogService
    diary_service: DiaryService
    data_eraser: DataEraser


def build_storage(settings: Settings) -> KeyValueStorage:
    """Create the storage selected by the settings."""
    if settings.storage_path is not None:
        return JsonFileKeyValueStorage(settings.storage_path.expanduser())
    return InMemoryKeyValueStorage(quota_bytes=settings.storage_quota_bytes)


def build_container(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    catalog: FoodCatalog | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    resolved_storage = storage or build_storage(resolved_settings)
    keys = StorageKeys(namespace=resolved_settings.key_namespace)
    documents = DocumentStore(resolved_storage)
    user_directory = UserDirectory(documents, keys=keys)
    daily_records = DailyRecordStore(documents, keys=keys)
    custom_foods = CustomFoodStore(documents, keys=keys)
    catalog_service = CatalogService(
        catalog=catalog or StaticFoodCatalog(),
        custom_foods=custom_foods,
    )
    diary_service = DiaryService(daily_records)
    data_eraser = DataEraser(
        documents=documents,
        users=user_directory,
        keys=keys,
        include_custom_foods=resolved_settings.erase_custom_foods,
    )
    return AppContainer(
        settings=resolved_settings,
        storage=resolved_storage,
        keys=keys,
        documents=documents,
        user_directory=user_directory,
        daily_records=daily_records,
        custom_foods=custom_foods,
        catalog_service=catalog_service,
        diary_service=diary_service,
        data_eraser=data_eraser,
    )
