"""请求/响应模型基类"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """对外使用 camelCase 字段名，内部使用 snake_case"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        allow_inf_nan = False
