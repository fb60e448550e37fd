# -*- coding:utf-8 -*-
from django import dispatch

# Connect a handler to the "received" signal to store accepted pingbacks.
# The signal provides the following keyword arguments:
#
# - sender: whatever the caller passed, the Django HttpRequest when the
#   pingback came through server_view
# - event: the SuccessEvent itself
# - source_url: a URL that links to your server URL
# - target_url: a URL being linked to by the page at source_url
# - domain: host of source_url without a leading "www."
# - title: title of the source page
# - remote_ip: address the pingback request came from
#
# The signal is sent only for pingbacks that passed every check: the target
# exists, it was not pinged from this source before and the source page
# really links to it.

received = dispatch.Signal()
