from typing import Any, Dict

from pydantic import BaseModel

from copyspark.errors import CopySparkError


def serialize_result(record: BaseModel) -> Dict[str, Any]:
    """Typed record -> JSON body, using wire (camelCase) names."""
    return {
        "status": "success",
        "result": record.model_dump(by_alias=True, mode="json"),
    }


def serialize_error(error: CopySparkError) -> Dict[str, Any]:
    return {"status": "error", **error.to_dict()}
