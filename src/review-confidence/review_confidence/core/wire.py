"""WireModel: shared pydantic base for models exchanged as camelCase JSON."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Frozen model whose fields use snake_case in Python and camelCase on the wire.

    Both spellings are accepted on input; ``model_dump(by_alias=True)``
    produces the camelCase form.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
