from .values import Undefined, ValueKind, kind_of
from .exceptions import CyclicStructureError, LightdashError, PathSyntaxError
from .predicates import (
    is_array,
    is_array_like,
    is_array_typed,
    is_boolean,
    is_defined,
    is_empty,
    is_instance_of,
    is_map,
    is_nil,
    is_number,
    is_object,
    is_object_like,
    is_primitive,
    is_set,
    is_string,
    is_string_number,
    is_symbol,
    is_type_of,
    is_undefined,
)
from .equality import is_equal, is_same
from .path_conversion import is_valid_path, path_to_string, string_to_path
from .path_access import get_path, has_key, has_path
from .number_ops import (
    is_in_range,
    number_clamp,
    number_in_range,
    number_random_float,
    number_random_int,
)
from .iteration import for_each, for_each_deep, for_each_entry, for_each_entry_deep, for_times
from .array_ops import (
    ValueCounts,
    arr_chunk,
    arr_clone,
    arr_clone_deep,
    arr_compact,
    arr_count,
    arr_difference,
    arr_flatten_deep,
    arr_intersection,
    arr_map,
    arr_map_deep,
    arr_step,
    arr_uniq,
)
from .object_ops import (
    map_from_object,
    obj_clone,
    obj_clone_deep,
    obj_entries,
    obj_from_deep,
    obj_keys,
    obj_map,
    obj_map_deep,
    obj_values,
)
from .attempt import Failure, Success, fn_attempt

__version__ = "0.1.0"

__all__ = [
    "Undefined",
    "ValueKind",
    "kind_of",
    "LightdashError",
    "PathSyntaxError",
    "CyclicStructureError",
    "is_array",
    "is_array_like",
    "is_array_typed",
    "is_boolean",
    "is_defined",
    "is_empty",
    "is_equal",
    "is_in_range",
    "is_instance_of",
    "is_map",
    "is_nil",
    "is_number",
    "is_object",
    "is_object_like",
    "is_primitive",
    "is_same",
    "is_set",
    "is_string",
    "is_string_number",
    "is_symbol",
    "is_type_of",
    "is_undefined",
    "is_valid_path",
    "path_to_string",
    "string_to_path",
    "get_path",
    "has_key",
    "has_path",
    "number_clamp",
    "number_in_range",
    "number_random_float",
    "number_random_int",
    "for_each",
    "for_each_deep",
    "for_each_entry",
    "for_each_entry_deep",
    "for_times",
    "ValueCounts",
    "arr_chunk",
    "arr_clone",
    "arr_clone_deep",
    "arr_compact",
    "arr_count",
    "arr_difference",
    "arr_flatten_deep",
    "arr_intersection",
    "arr_map",
    "arr_map_deep",
    "arr_step",
    "arr_uniq",
    "map_from_object",
    "obj_clone",
    "obj_clone_deep",
    "obj_entries",
    "obj_from_deep",
    "obj_keys",
    "obj_map",
    "obj_map_deep",
    "obj_values",
    "fn_attempt",
    "Success",
    "Failure",
]
