# Models - in-memory activity records
from insights_engine.models.activity import ActivityRecord, ActivityType, RecordKey
from insights_engine.models.store import RecordStore
