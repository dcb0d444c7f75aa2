from run_artifacts.orchestration.fetcher import fetch_all

__all__ = ["fetch_all"]
