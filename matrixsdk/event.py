"""Block event subscriptions: filter options and the filtered block model."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

DEFAULT_BCNAME = "xuper"
DEFAULT_BLOCK_CHAN_BUFFER_SIZE = 100

_POLL_INTERVAL = 0.05


@dataclass
class BlockRange:
    """Range of block heights to watch, as strings."""

    start: str = ""
    end: str = ""


@dataclass
class BlockFilter:
    """What blocks, transactions and events a subscription receives."""

    bcname: str = ""
    contract: str = ""
    event_name: str = ""
    initiator: str = ""
    auth_require: str = ""
    from_addr: str = ""
    to_addr: str = ""
    block_range: BlockRange | None = None
    exclude_tx: bool = False
    exclude_tx_event: bool = False


def _default_filter() -> BlockFilter:
    return BlockFilter(bcname=DEFAULT_BCNAME)


@dataclass
class BlockEventOptions:
    """Settings of a block event subscription."""

    block_filter: BlockFilter = field(default_factory=_default_filter)
    block_chan_buffer_size: int = DEFAULT_BLOCK_CHAN_BUFFER_SIZE
    skip_empty_tx: bool = False


BlockEventOption = Callable[[BlockEventOptions], None]


@dataclass
class ContractEvent:
    """An event emitted by a contract call."""

    contract: str = ""
    name: str = ""
    body: str = ""


@dataclass
class FilteredTransaction:
    """A transaction with the events that passed the filter."""

    txid: str = ""
    events: list = field(default_factory=list)


def _text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


@dataclass
class FilteredBlock:
    """A block reduced to the transactions and events that passed the filter."""

    bcname: str = ""
    blockid: str = ""
    block_height: int = 0
    txs: list = field(default_factory=list)

    @classmethod
    def from_message(cls, message: Any) -> "FilteredBlock":
        """Build a block from a message with the fields of the wire format."""
        return cls(
            bcname=message.bcname,
            blockid=message.blockid,
            block_height=message.block_height,
            txs=[
                FilteredTransaction(
                    txid=tx.txid,
                    events=[
                        ContractEvent(
                            contract=ev.contract, name=ev.name, body=_text(ev.body)
                        )
                        for ev in tx.events
                    ],
                )
                for tx in message.txs
            ],
        )


class Watcher:
    """Receives filtered blocks until it is closed.

    Blocks arrive in ``filtered_blocks``; iterating over the watcher yields
    them and stops once the watcher is closed and no block is left.
    """

    def __init__(self, options: BlockEventOptions) -> None:
        self.options = options
        self.filtered_blocks = queue.Queue(maxsize=options.block_chan_buffer_size)
        self.exit_event = threading.Event()

    def close(self) -> None:
        """Stop watching."""
        self.exit_event.set()

    def __iter__(self) -> Iterator[FilteredBlock]:
        while True:
            try:
                yield self.filtered_blocks.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                if self.exit_event.is_set():
                    return


def init_event_opts(*args: BlockEventOption) -> BlockEventOptions:
    """Return the default options with each option in ``args`` applied in turn."""
    opt = BlockEventOptions()
    for apply in args:
        try:
            apply(opt)
        except ValueError as exc:
            raise ValueError(f"event option failed: {exc}") from exc
    return opt


def with_block_chan_buffer_size(size: int) -> BlockEventOption:
    """Set how many blocks may wait to be read; the default is 100."""

    def apply(opt: BlockEventOptions) -> None:
        if size < 0:
            raise ValueError("Invalid size for watcher blockChanBufferSize chan")
        opt.block_chan_buffer_size = size

    return apply


def with_skip_empty_tx() -> BlockEventOption:
    """Skip blocks that hold no matching transaction."""

    def apply(opt: BlockEventOptions) -> None:
        opt.skip_empty_tx = True

    return apply


def with_block_event_bcname(name: str) -> BlockEventOption:
    """Watch the chain ``name``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.bcname = name

    return apply


def with_contract(contract: str) -> BlockEventOption:
    """Receive only transactions that call ``contract``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.contract = contract

    return apply


def with_event_name(event_name: str) -> BlockEventOption:
    """Receive only events named ``event_name``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.event_name = event_name

    return apply


def with_initiator(initiator: str) -> BlockEventOption:
    """Receive only transactions started by ``initiator``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.initiator = initiator

    return apply


def with_auth_require(auth_require: str) -> BlockEventOption:
    """Receive only transactions that require ``auth_require``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.auth_require = auth_require

    return apply


def with_from_addr(from_addr: str) -> BlockEventOption:
    """Receive only transfers from ``from_addr``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.from_addr = from_addr

    return apply


def with_to_addr(to_addr: str) -> BlockEventOption:
    """Receive only transfers to ``to_addr``."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.to_addr = to_addr

    return apply


def with_block_range(start_block: str, end_block: str) -> BlockEventOption:
    """Watch blocks from ``start_block`` to ``end_block``."""

    def apply(opt: BlockEventOptions) -> None:
        if opt.block_filter.block_range is None:
            opt.block_filter.block_range = BlockRange()
        opt.block_filter.block_range.start = start_block
        opt.block_filter.block_range.end = end_block

    return apply


def with_exclude_tx(exclude_tx: bool) -> BlockEventOption:
    """Leave transactions out of the received blocks."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.exclude_tx = exclude_tx

    return apply


def with_exclude_tx_event(exclude_tx_event: bool) -> BlockEventOption:
    """Leave contract events out of the received transactions."""

    def apply(opt: BlockEventOptions) -> None:
        opt.block_filter.exclude_tx_event = exclude_tx_event

    return apply