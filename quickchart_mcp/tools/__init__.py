from .apexcharts import ApexChartsAdapter
from .barcode import BarcodeAdapter
from .base import ToolAdapter, ToolDefinition, run_tool
from .chart import ChartAdapter
from .googlecharts import GoogleChartsAdapter
from .graphviz import GraphvizAdapter
from .help import HelpTool
from .qrcode import QRCodeAdapter
from .sparkline import SparklineAdapter
from .table import TableAdapter
from .textchart import TextChartAdapter
from .watermark import WatermarkAdapter
from .wordcloud import WordCloudAdapter

# listing order of tools/list
TOOLS = (
    ChartAdapter(),
    ApexChartsAdapter(),
    GoogleChartsAdapter(),
    TextChartAdapter(),
    SparklineAdapter(),
    GraphvizAdapter(),
    WordCloudAdapter(),
    BarcodeAdapter(),
    QRCodeAdapter(),
    TableAdapter(),
    WatermarkAdapter(),
    HelpTool(),
)

__all__ = ["TOOLS", "ToolAdapter", "ToolDefinition", "HelpTool", "run_tool"]
