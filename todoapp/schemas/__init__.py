from todoapp.schemas.todo import RangeParameters, Todo

__all__ = ["RangeParameters", "Todo"]
