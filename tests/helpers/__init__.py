"""Test helper utilities."""

from service.errors import FetchFailure, SaveFailure


class FakeBackendClient:
    """In-memory stand-in for BackendClient that records every call."""

    base_url = "http://backend.test"

    def __init__(self, harvests=None, investments=None):
        self.harvests = list(harvests or [])
        self.investments = list(investments or [])
        self.calls = []
        self.fail_harvest_read = False
        self.fail_investment_read = False
        self.fail_writes = False

    def url(self, path):
        return f"{self.base_url}{path}"

    def list_harvests(self):
        self.calls.append(("GET", "/harvest"))
        if self.fail_harvest_read:
            raise FetchFailure(status_code=500)
        return [dict(h) for h in self.harvests]

    def list_investments(self):
        self.calls.append(("GET", "/investment"))
        if self.fail_investment_read:
            raise FetchFailure(status_code=500)
        return [dict(i) for i in self.investments]

    def create_harvest(self, payload):
        self.calls.append(("POST", "/harvest", payload))
        if self.fail_writes:
            raise SaveFailure("Failed to save harvest", status_code=422)
        self.harvests.append({"_id": f"h{len(self.harvests) + 1}", **payload})

    def create_investment(self, payload):
        self.calls.append(("POST", "/investment", payload))
        if self.fail_writes:
            raise SaveFailure("Failed to save investment", status_code=422)
        self.investments.append({"_id": f"i{len(self.investments) + 1}", **payload})

    def reads(self):
        return [c[1] for c in self.calls if c[0] == "GET"]

    def posts(self):
        return [c for c in self.calls if c[0] == "POST"]
