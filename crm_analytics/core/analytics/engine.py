"""Wiring of the analytics services from configuration."""

from __future__ import annotations

from dataclasses import dataclass

from crm_analytics.core.analytics.adaptive_domain import AdaptiveDomainEngine
from crm_analytics.core.analytics.correlation import CorrelationMatrixBuilder
from crm_analytics.core.analytics.descriptive import StatisticsCalculator
from crm_analytics.core.analytics.histogram import HistogramBinner
from crm_analytics.core.analytics.outliers import OutlierDetector
from crm_analytics.core.analytics.regression import TrendForecaster
from crm_analytics.core.analytics.trend import TrendAnalyzer
from crm_analytics.core.config_loader import EngineConfig


@dataclass(frozen=True)
class AnalyticsEngine:
    """Bundle of stateless analytics services sharing one configuration."""

    config: EngineConfig
    statistics: StatisticsCalculator
    outliers: OutlierDetector
    forecaster: TrendForecaster
    correlations: CorrelationMatrixBuilder
    domains: AdaptiveDomainEngine
    histograms: HistogramBinner
    trends: TrendAnalyzer


def build_engine(config: EngineConfig | None = None) -> AnalyticsEngine:
    """Instantiate every analytics service with the configured constants."""

    config = config or EngineConfig()
    outliers = OutlierDetector(iqr_multiplier=config.outlier_iqr_multiplier)
    return AnalyticsEngine(
        config=config,
        statistics=StatisticsCalculator(outlier_detector=outliers),
        outliers=outliers,
        forecaster=TrendForecaster(),
        correlations=CorrelationMatrixBuilder(),
        domains=AdaptiveDomainEngine(
            padding_percent=config.domain_padding_percent,
            adaptive_threshold=config.adaptive_threshold,
            headroom_factor=config.headroom_factor,
        ),
        histograms=HistogramBinner(bin_count=config.histogram_bin_count),
        trends=TrendAnalyzer(stable_threshold_pct=config.trend_stable_threshold_pct),
    )


__all__ = ["AnalyticsEngine", "build_engine"]
