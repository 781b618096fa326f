"""Tests for BaseViewModel subscription tracking."""

from unittest.mock import Mock

from tableview.viewmodels.base import BaseViewModel


class TestBaseViewModel:
    def test_track_returns_subscription(self):
        vm = BaseViewModel()
        sub = Mock()
        assert vm.track(sub) is sub

    def test_dispose_releases_everything(self):
        vm = BaseViewModel()
        a, b = Mock(), Mock()
        vm.track(a)
        vm.track(b)

        vm.dispose()

        a.dispose.assert_called_once_with()
        b.dispose.assert_called_once_with()
        assert vm._subscriptions == []

    def test_release_disposes_single_subscription(self):
        vm = BaseViewModel()
        a, b = Mock(), Mock()
        vm.track(a)
        vm.track(b)

        vm.release(a)

        a.dispose.assert_called_once_with()
        b.dispose.assert_not_called()
        assert vm._subscriptions == [b]

    def test_context_manager_disposes(self):
        sub = Mock()
        with BaseViewModel() as vm:
            vm.track(sub)
        sub.dispose.assert_called_once_with()
