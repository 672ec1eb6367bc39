from .tuple_desc import FieldEntry, TupleDesc


__all__ = ["FieldEntry", "TupleDesc"]
