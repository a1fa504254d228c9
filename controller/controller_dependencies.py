# controller/controller_dependencies.py
from config.settings import settings
from repository.blob_repository import BlobRepository
from repository.key_index_repository import KeyIndexRepository
from service.image_service import ImageService
from service.index_refresher import IndexRefresher


def get_image_service() -> ImageService:
    _index = KeyIndexRepository()
    _blobs = BlobRepository()
    _service = ImageService(_index, _blobs, settings.partitions())
    return _service


def get_index_refresher() -> IndexRefresher:
    _index = KeyIndexRepository()
    _blobs = BlobRepository()
    return IndexRefresher(_index, _blobs, settings.partitions())
