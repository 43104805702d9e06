"""
Pydantic schemas for User and Session rows
"""
from streamcatalog.models import User, Session
from streamcatalog.schemas.factory import create_insert_schema, create_select_schema

# id comes from the identity provider, so it stays in the payload
UpsertUser = create_insert_schema(User, omit={"created_at", "updated_at"}, name="UpsertUser")
UserRecord = create_select_schema(User, name="UserRecord")

InsertSession = create_insert_schema(Session, name="InsertSession")
SessionRecord = create_select_schema(Session, name="SessionRecord")
