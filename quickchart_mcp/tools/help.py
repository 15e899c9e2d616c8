"""Static usage documentation for the visualization tools."""

import json
from typing import Any, Dict, Mapping

from ..config import Settings
from ..errors import InvalidParams
from ..results import ToolResult, text_block
from ..validation import check_optional_string
from .base import ToolDefinition

# tool name -> (enablement key, documentation entry)
TOOL_DOCUMENTATION: Dict[str, tuple] = {
    "create-chart-using-chartjs": (
        "chart",
        {
            "description": "Create charts using Chart.js and QuickChart.io - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/",
            "supportedChartTypes": [
                "bar - Bar charts for comparing values across categories",
                "line - Line charts for showing trends over time",
                "pie - Pie charts for showing proportions and percentages",
                "doughnut - Doughnut charts (pie chart with hollow center)",
                "radar - Radar charts for comparing multiple variables",
                "polarArea - Polar area charts for cyclical data visualization",
                "scatter - Scatter plots for correlation analysis",
                "bubble - Bubble charts for three-dimensional data relationships",
                "radialGauge - Radial gauges for a single percentage value",
                "speedometer - Speedometer gauges, rendered as radial gauges",
            ],
            "promptExamples": [
                'Sales Reports: "Create a bar chart showing monthly sales data"',
                'Performance Metrics: "Generate a gauge chart showing our 85% performance score"',
                'Trend Analysis: "Show quarterly revenue growth as a line chart"',
                'Data Comparison: "Compare product performance across regions using a pie chart"',
                'Statistical Analysis: "Create a scatter plot to show the relationship between price and sales"',
            ],
            "usageExample": {
                "action": "save_file",
                "outputPath": "sales.png",
                "chart": {
                    "type": "bar",
                    "data": {
                        "labels": ["Q1", "Q2", "Q3", "Q4"],
                        "datasets": [
                            {
                                "label": "Sales 2024",
                                "data": [65, 59, 80, 81],
                                "backgroundColor": "rgba(54, 162, 235, 0.8)",
                            }
                        ],
                    },
                },
            },
        },
    ),
    "create-chart-using-apexcharts": (
        "apexcharts",
        {
            "description": "Create charts using ApexCharts library - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/apex-charts-image-rendering/",
            "supportedChartTypes": [
                "line - Line charts for depicting trends and behaviors over time",
                "area - Area charts for showing cumulative data trends",
                "bar - Bar charts for categorical data comparison",
                "pie - Pie charts for proportion visualization",
                "donut - Donut charts for enhanced proportion display",
                "scatter - Scatter plots for correlation analysis",
                "bubble - Bubble charts for multi-dimensional data",
                "candlestick - Candlestick charts for financial data",
                "boxPlot - Box plots for statistical data distribution",
                "heatmap - Heat maps for matrix data visualization",
                "treemap - Tree maps for hierarchical data",
                "radar - Radar charts for multi-variable comparison",
                "radialBar - Radial bar charts and circular gauges",
                "rangeArea - Range area charts for data ranges",
                "rangeBar - Range bar charts for time periods",
            ],
            "promptExamples": [
                'Financial Dashboards: "Create a candlestick chart for stock prices"',
                'Interactive Reports: "Generate a multi-series area chart"',
                'Time Series Analysis: "Show data over a datetime axis"',
            ],
            "usageExample": {
                "action": "get_url",
                "config": {
                    "series": [{"name": "Sales", "data": [30, 40, 45, 50, 49, 60, 70, 91]}],
                    "chart": {"type": "line"},
                    "xaxis": {"categories": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug"]},
                },
            },
        },
    ),
    "create-chart-using-googlecharts": (
        "googlecharts",
        {
            "description": "Create charts using Google Charts library - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/google-charts-image-server/",
            "supportedChartTypes": [
                "bar, column, line, area - Category and trend charts",
                "pie, donut - Proportion charts",
                "scatter, bubble - Correlation charts",
                "gauge - Gauge charts for measurement and target values",
                "timeline, gantt, calendar - Date-based charts",
                "geochart - Geographic charts and world maps",
                "treemap, sankey, org - Hierarchy and flow charts",
                "candlestick, histogram, waterfall - Financial and distribution charts",
            ],
            "promptExamples": [
                'Geographic Data: "Create a world map showing sales by country"',
                'Organizational Charts: "Generate a company hierarchy diagram"',
                'Timeline Visualizations: "Show project milestones on a timeline chart"',
            ],
            "usageExample": {
                "action": "get_url",
                "code": (
                    "const data = google.visualization.arrayToDataTable([['Task', 'Hours'], ['Work', 8], "
                    "['Sleep', 8], ['Eat', 2], ['Commute', 2]]); "
                    "const chart = new google.visualization.PieChart(document.getElementById('chart')); "
                    "chart.draw(data);"
                ),
                "packages": "corechart",
            },
        },
    ),
    "create-chart-using-natural-language": (
        "textchart",
        {
            "description": "Generate charts from natural language descriptions - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/apis/text-to-chart/",
            "mainFeatures": [
                'Natural Language Analysis: Understands descriptions like "blue line chart showing monthly sales"',
                "Automatic Chart Selection: Determines the chart type from the description",
                "Data Integration: Comma-separated values in data1, data2 and labels",
            ],
            "promptExamples": [
                'Quick Prototyping: "Show monthly revenue growth as a blue line chart"',
                'Data Exploration: "Create a chart that best represents this sales data"',
            ],
            "usageExample": {
                "action": "get_url",
                "description": "Show monthly revenue growth as a blue line chart",
                "data1": "100,120,150,180,200",
                "labels": "Jan,Feb,Mar,Apr,May",
                "title": "Revenue Growth",
            },
        },
    ),
    "create-sparkline-using-chartjs": (
        "sparkline",
        {
            "description": "Create compact sparkline charts - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/sparkline-api/",
            "keyFeatures": [
                "Compact Design: Small charts embeddable in dashboards and reports",
                "Customizable Styling: Adjustable colors, line thickness and point styles",
                "Multiple Series: Several datasets in one sparkline",
            ],
            "promptExamples": [
                'Dashboard Widgets: "Generate small trend indicators for KPI dashboard"',
                'Inline Metrics: "Create mini charts for email reports"',
            ],
            "usageExample": {
                "action": "get_url",
                "chart": {
                    "type": "sparkline",
                    "data": {"datasets": [{"data": [10, 15, 12, 18, 22, 20, 25]}]},
                },
                "width": 200,
                "height": 50,
            },
        },
    ),
    "create-diagram-using-graphviz": (
        "graphviz",
        {
            "description": "Create graph diagrams using GraphViz - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/graphviz-api/",
            "whatYouCanCreate": [
                "Flowcharts: Step-by-step process diagrams with decision points",
                "Organizational Charts: Company hierarchy and reporting structures",
                "Network Diagrams: System architecture and infrastructure maps",
                "State Machines: System state transitions and workflows",
                "Dependency Graphs: Project dependencies and task relationships",
            ],
            "supportedLayoutAlgorithms": [
                "dot: Hierarchical graphs (flowcharts, org charts)",
                "neato: Undirected graphs (network diagrams)",
                "fdp: Force-directed model layouts",
                "circo: Circular layouts (cycle diagrams)",
                "twopi: Radial layouts (hub-and-spoke diagrams)",
                "osage: Clustered layouts",
                "patchwork: Squarified tree maps",
            ],
            "promptExamples": [
                'Workflow Documentation: "Generate a flowchart showing our approval process"',
                'System Architecture: "Create a network diagram of our infrastructure"',
            ],
            "usageExample": {
                "action": "get_url",
                "graph": 'digraph G { Start -> Process -> Decision; Decision -> End [label="Yes"]; '
                'Decision -> Process [label="No"]; }',
                "layout": "dot",
            },
        },
    ),
    "create-wordcloud": (
        "wordcloud",
        {
            "description": "Create word cloud visualizations - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/word-cloud-api/",
            "promptExamples": [
                'Content Analysis: "Create a word cloud from customer feedback"',
                'Survey Results: "Visualize most common responses in survey data"',
            ],
            "usageExample": {
                "action": "get_url",
                "text": "innovation technology artificial intelligence machine learning data science",
                "width": 800,
                "height": 400,
                "backgroundColor": "#f0f0f0",
            },
        },
    ),
    "create-barcode": (
        "barcode",
        {
            "description": "Generate barcodes - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/barcode-api/",
            "supportedBarcodeTypes": [
                "qrcode: High-density 2D barcode for URLs, text and data",
                "code128: Versatile 1D barcode for alphanumeric content",
                "ean13 / upca: Standard retail product identification",
                "datamatrix: Compact 2D barcode for small items",
                "pdf417: High-capacity 2D barcode for documents",
                "azteccode: Compact 2D barcode with built-in error correction",
            ],
            "promptExamples": [
                'Inventory Management: "Generate product barcodes for warehouse system"',
                'Asset Tracking: "Generate Code128 barcodes for equipment tracking"',
            ],
            "usageExample": {
                "action": "get_url",
                "type": "code128",
                "text": "ABC123456789",
                "width": 300,
                "height": 100,
            },
        },
    ),
    "create-qr-code": (
        "qrcode",
        {
            "description": "Create QR codes with extensive customization options - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/qr-codes/",
            "whatYouCanCreate": [
                "Website Links: Direct links to websites and landing pages",
                "Contact Information: vCard data for easy contact sharing",
                "WiFi Access: Network credentials for guest access",
                "Payment Information: Payment links and addresses",
            ],
            "promptExamples": [
                'Marketing Campaigns: "Create QR codes linking to product pages"',
                'Contact Sharing: "Create QR codes containing business card information"',
            ],
            "usageExample": {
                "action": "save_file",
                "outputPath": "website-qr.png",
                "text": "https://example.com",
                "size": 300,
                "centerImageUrl": "https://example.com/logo.png",
                "centerImageSizeRatio": 0.2,
                "caption": "Visit our website",
            },
        },
    ),
    "create-table": (
        "table",
        {
            "description": "Convert data to table images - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/apis/table-image-api/",
            "promptExamples": [
                'Financial Reports: "Convert quarterly earnings data into a table"',
                'Comparison Charts: "Create feature comparison table for products"',
            ],
            "usageExample": {
                "action": "get_url",
                "data": {
                    "title": "Q4 Sales Report",
                    "columns": [
                        {"title": "Product", "dataIndex": "product"},
                        {"title": "Revenue", "dataIndex": "revenue"},
                    ],
                    "dataSource": [
                        {"product": "Product A", "revenue": "$50,000"},
                        {"product": "Product B", "revenue": "$75,000"},
                    ],
                },
            },
        },
    ),
    "create-watermark": (
        "watermark",
        {
            "description": "Add watermarks and logos to images - get URL or save as file",
            "documentation": "https://quickchart.io/documentation/watermark-api/",
            "promptExamples": [
                'Document Protection: "Add company logo watermark to reports"',
                'Copyright Protection: "Add attribution to shared visualizations"',
            ],
            "usageExample": {
                "action": "get_url",
                "mainImageUrl": "https://example.com/chart.png",
                "markImageUrl": "https://example.com/logo.png",
                "position": "bottom-right",
                "opacity": 0.7,
            },
        },
    ),
}


def catalogue(settings: Settings) -> Dict[str, Dict[str, Any]]:
    """Documentation entries for the tools enabled in ``settings``."""
    return {
        name: {"name": name, **entry}
        for name, (key, entry) in TOOL_DOCUMENTATION.items()
        if settings.is_enabled(key)
    }


class HelpTool:
    name = "get-visualization-tool-help"
    key = "help"
    description = (
        "Get detailed usage information and examples for all available chart, diagram, and QR code tools"
    )
    input_schema = {
        "type": "object",
        "properties": {
            "tool": {"type": "string", "description": "Name of a single tool to describe (default: all tools)"},
        },
        "additionalProperties": False,
    }

    def definition(self) -> ToolDefinition:
        return ToolDefinition(name=self.name, description=self.description, input_schema=self.input_schema)

    async def call(self, args: Mapping[str, Any], client, settings: Settings) -> ToolResult:
        error = check_optional_string(args, "tool")
        if error is not None:
            raise error

        docs = catalogue(settings)
        tool = args.get("tool")
        if tool is not None:
            if tool not in docs:
                raise InvalidParams(f"Unknown tool: {tool}. Available tools are: {', '.join(docs)}")
            docs = {tool: docs[tool]}
        return ToolResult(content=(text_block(json.dumps(docs, indent=2, ensure_ascii=False)),))
