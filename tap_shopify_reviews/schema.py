"""JSON schema definitions for the reviews stream."""

from singer_sdk.typing import (
    PropertiesList,
    Property,
    StringType,
)

REVIEWS_SCHEMA = PropertiesList(
    Property("rating", StringType, required=True, description="Star rating 0-5, empty if unknown"),
    Property("storeName", StringType, required=True),
    Property("country", StringType, required=True),
    Property("appUsageDuration", StringType, required=True, description="Time the store has used the app"),
    Property("date", StringType, required=True, description="Review date as displayed"),
    Property("content", StringType, required=True, description="Review body text"),
    Property("helpful", StringType, required=True, description="Reserved, always empty"),
).to_dict()
