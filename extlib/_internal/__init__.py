# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Internal helpers for extlib. Not part of the public API."""
