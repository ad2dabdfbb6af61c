from __future__ import annotations
import logging
import os
from typing import Dict, Optional

import psutil

log = logging.getLogger(__name__)


def partition_for(path: str) -> Optional[Dict[str, object]]:
    """Usage of the mounted partition holding ``path``, or None if unknown."""
    target = os.path.abspath(path)
    best = None
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception as e:
        log.debug("cannot list partitions: %s", e)
        return None
    for p in parts:
        mp = p.mountpoint
        if not mp:
            continue
        mp_norm = os.path.abspath(mp)
        prefix = mp_norm if mp_norm.endswith(os.sep) else mp_norm + os.sep
        if target != mp_norm and not target.startswith(prefix):
            continue
        # the deepest mountpoint wins
        if best is None or len(mp_norm) > len(best[0]):
            best = (mp_norm, p.fstype)
    if best is None:
        return None

    mountpoint, fstype = best
    try:
        u = psutil.disk_usage(mountpoint)
    except Exception as e:
        log.debug("cannot read usage of %s: %s", mountpoint, e)
        return None
    return {
        "mountpoint": mountpoint,
        "fstype": fstype,
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }
