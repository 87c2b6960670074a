"""Shared pytest fixtures: an in-memory stand-in for the pynetworktables API subset the client uses."""

import pytest

from limelight_client import Limelight


class FakeEntry:
    def __init__(self, table, key):
        self.table = table
        self.key = key
        self.value = None
        self.listeners = []

    # Reads

    def _get(self, default):
        return default if self.value is None else self.value

    def getDouble(self, default):
        return self._get(default)

    def getDoubleArray(self, default):
        return self._get(default)

    def getString(self, default):
        return self._get(default)

    def getStringArray(self, default):
        return self._get(default)

    # Writes

    def _set(self, value):
        self.value = value
        self.table.writes.append((self.key, value))
        return True

    def setNumber(self, value):
        return self._set(value)

    def setDouble(self, value):
        return self._set(float(value))

    def setDoubleArray(self, value):
        return self._set(tuple(value))

    def addListener(self, listener, flags, paramIsNew=True):
        self.listeners.append((listener, flags))

    def publish(self, value):
        """Simulate the camera publishing a new value."""
        self.value = value
        for listener, _ in self.listeners:
            listener(self, self.key, value, True)


class FakeTable:
    def __init__(self, name):
        self.name = name
        self.entries = {}
        self.writes = []

    def getEntry(self, key):
        if key not in self.entries:
            self.entries[key] = FakeEntry(self, key)
        return self.entries[key]

    def put(self, key, value):
        """Arrange a camera-side value without recording a client write."""
        self.getEntry(key).value = value

    def written(self, key):
        return [value for k, value in self.writes if k == key]


class FakeNetworkTablesInstance:
    def __init__(self):
        self.tables = {}
        self.flush_count = 0

    def getTable(self, name):
        if name not in self.tables:
            self.tables[name] = FakeTable(name)
        return self.tables[name]

    def flush(self):
        self.flush_count += 1


@pytest.fixture()
def nt_instance():
    return FakeNetworkTablesInstance()


@pytest.fixture()
def limelight(nt_instance):
    return Limelight("limelight-front", instance=nt_instance)


@pytest.fixture()
def table(limelight):
    return limelight.network_table
