"""Feed schemas."""
from typing import Annotated, List, Union
from pydantic import Field

from foundershub.schemas.common import CamelModel
from foundershub.schemas.poll import PollOut
from foundershub.schemas.update import UpdateOut

FeedItem = Annotated[Union[UpdateOut, PollOut], Field(discriminator="type")]


class FeedPage(CamelModel):
    items: List[FeedItem]
    has_more: bool
