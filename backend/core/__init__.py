from core.dataset import DatasetSnapshot, load_dataset  # noqa: F401
from core.classifier import classify, answer_query  # noqa: F401
from core.conversation import Conversation, ConversationRegistry  # noqa: F401
from core.catalog import list_decades, journals_in_decade, journal_detail, search, visualization_data  # noqa: F401
