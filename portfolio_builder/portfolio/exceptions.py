class PortfolioError(Exception):
    """Base error for the portfolio pipeline."""


class PortfolioNotFound(PortfolioError):
    def __init__(self, portfolio_id):
        super().__init__(f"Portfolio not found: {portfolio_id}")
        self.portfolio_id = portfolio_id


class TemplateNotFound(PortfolioError):
    def __init__(self, template_id):
        super().__init__(f"Template not found: {template_id}")
        self.template_id = template_id


class UnsupportedExportFormat(PortfolioError):
    def __init__(self, export_format):
        super().__init__(f"Unsupported export format: {export_format}")
        self.export_format = export_format


class AssetFetchError(PortfolioError):
    def __init__(self, url, reason):
        super().__init__(f"Failed to fetch asset {url}: {reason}")
        self.url = url
        self.reason = reason
