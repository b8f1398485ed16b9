"""Converts results to and from unstructured data with cattrs.

Results are unstructured as externally tagged dictionaries, where the single key is
the name of the variant.

Example:
    .. code-block:: python

        from fallible import success, failure
        from fallible.serialization import structure_result, unstructure_result

        unstructure_result(success(1))  # {"Success": 1}
        unstructure_result(failure("not found"))  # {"Failure": "not found"}

        structure_result({"Success": 1}, int, str)  # Success(1)
"""

from ._result_hooks import (
    configure_result_hooks,
    default_converter,
    structure_result,
    unstructure_result,
)

__all__ = [
    "configure_result_hooks",
    "default_converter",
    "structure_result",
    "unstructure_result",
]
