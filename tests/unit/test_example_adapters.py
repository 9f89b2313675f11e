"""Tests for the example sender adapters (template/reference adapters)."""

from courier.sender.example_adapters import (
    ExampleCryptographer,
    ExampleRecognizer,
    ExampleTransmitter,
)
from courier.sender.models import RawFile


class TestExampleRecognizer:
    def test_recognizes_non_empty_file(self) -> None:
        document = ExampleRecognizer().try_recognize(RawFile("a.txt", b"abc"))
        assert document is not None
        assert document.name == "a.txt"
        assert document.content == b"abc"
        assert document.format == "4.0"

    def test_uses_configured_format(self) -> None:
        document = ExampleRecognizer("3.1").try_recognize(RawFile("a.txt", b"abc"))
        assert document is not None
        assert document.format == "3.1"

    def test_does_not_recognize_empty_file(self) -> None:
        assert ExampleRecognizer().try_recognize(RawFile("a.txt", b"")) is None


class TestExampleCryptographer:
    def test_returns_content_unchanged(self) -> None:
        assert ExampleCryptographer().sign(b"abc", object()) == b"abc"


class TestExampleTransmitter:
    def test_accepts_and_keeps_payloads(self) -> None:
        transmitter = ExampleTransmitter()
        assert transmitter.try_send(b"one") is True
        assert transmitter.try_send(b"two") is True
        assert transmitter.sent == [b"one", b"two"]
