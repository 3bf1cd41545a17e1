"""Authorizers and vote item sources referenced by dotted path in tests."""

import asyncio
import time


def sample_items():
    return [
        {'id': 1, 'vote_total': 10},
        {'id': 2, 'vote_total': 30},
        {'id': 3, 'vote_total': 20},
    ]


def invalid_items():
    return [{'id': 1, 'vote_total': -5}]


async def allow_all(capability, viewer):
    return True


async def deny_all(capability, viewer):
    return False


def allow_all_sync(capability, viewer):
    return True


async def truthy_but_not_true(capability, viewer):
    return 'yes'


async def hanging(capability, viewer):
    await asyncio.sleep(60)
    return True


async def broken(capability, viewer):
    raise ConnectionError("auth backend unreachable")


def hanging_sync(capability, viewer):
    time.sleep(0.5)
    return True
