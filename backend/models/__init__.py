from models.journal import JournalEntry, JournalIssue, JournalDetail, DecadeSummary, SearchResults  # noqa: F401
from models.chart import ChartSpec, ChartSeries, ChartOptions  # noqa: F401
from models.chat import Answer, Turn, ChatRequest, ChatResponse, ConversationResponse  # noqa: F401
from models.visualization import VisualizationData, DecadeCountryShare, DecadeAuthorCount  # noqa: F401
