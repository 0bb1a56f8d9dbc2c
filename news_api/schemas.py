from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Bounds of a signed 32-bit INTEGER column.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str
    model_config = ConfigDict(from_attributes=True)


class TopicList(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str | None = None
    model_config = ConfigDict(from_attributes=True)


class UserList(BaseModel):
    users: list[UserResponse]


class UserEnvelope(BaseModel):
    user: UserResponse


# --- Comment ---

class CommentCreate(BaseModel):
    # Unknown keys are dropped so they can never reach the insert.
    model_config = ConfigDict(extra="ignore")

    username: StrictStr
    body: StrictStr


class NewCommentRequest(BaseModel):
    """Request body for ``POST /api/articles/{article_id}/comments``."""

    new_comment: CommentCreate = Field(alias="newComment")


# --- Article votes ---

class VoteUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    inc_votes: StrictInt = Field(ge=INT4_MIN, le=INT4_MAX)


class NewVoteRequest(BaseModel):
    """Request body for ``PATCH /api/articles/{article_id}``."""

    new_vote: VoteUpdate = Field(alias="newVote")
