from copyspark.llm.parser import ReplyParseError, load_json_reply, strip_fences

__all__ = ["ReplyParseError", "load_json_reply", "strip_fences"]
