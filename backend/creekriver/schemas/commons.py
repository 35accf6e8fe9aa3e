# backend/creekriver/schemas/commons.py
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# INTEGER 列の範囲（これを超える値はドライバで OverflowError になる）
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

RowId = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class CamelModel(BaseModel):
    # JSON は camelCase、Python 側は snake_case。ORM オブジェクトから直接生成できる
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
