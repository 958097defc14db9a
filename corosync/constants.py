"""Labels and defaults shared by the corosync output parsers."""

from __future__ import annotations

UINT64_MAX = 2**64 - 1

OUTPUT_ENCODING_ENV_VAR = "COROSYNC_OUTPUT_ENCODING"
DEFAULT_OUTPUT_ENCODING = "utf-8"

DEFAULT_PARSER = "corosync"

# corosync-cfgtool -s
RING_MARKER = "RING ID"
RING_ADDRESS_KEY = "id"
RING_STATUS_KEY = "status"
RING_FAULTY_MARKER = "FAULTY"

# corosync-quorumtool -p
NODE_ID_LABEL = "Node ID:"
RING_ID_LABEL = "Ring ID:"
RING_ID_SEPARATOR = "/"
QUORATE_LABEL = "Quorate:"
QUORATE_TRUE = "Yes"
EXPECTED_VOTES_LABEL = "Expected votes:"
HIGHEST_EXPECTED_LABEL = "Highest expected:"
TOTAL_VOTES_LABEL = "Total votes:"
QUORUM_LABEL = "Quorum:"
MEMBERSHIP_HEADER = "Membership information"
MEMBERSHIP_ID_COLUMN = "Nodeid"
MEMBERSHIP_VOTES_COLUMN = "Votes"
MEMBERSHIP_NAME_COLUMN = "Name"
LOCAL_MARKER = "(local)"
