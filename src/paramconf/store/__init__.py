from paramconf.store.client import (
    GET_PARAMETERS_CHUNK_SIZE,
    MAX_CONCURRENT_CHUNKS,
    ParameterStoreApi,
    is_parameter_not_found,
)

__all__ = [
    "GET_PARAMETERS_CHUNK_SIZE",
    "MAX_CONCURRENT_CHUNKS",
    "ParameterStoreApi",
    "is_parameter_not_found",
]
