from .fetcher import RemoteFetcher
