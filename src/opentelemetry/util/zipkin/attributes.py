# Copyright The OpenTelemetry Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Reserved binary annotation keys written or normalized by the sanitizers."""

NEGATIVE_DURATION_TAG = "errNegativeDuration"
ZERO_PARENT_ID_TAG = "errZeroParentID"

ERROR_TAG = "error"
ERROR_MESSAGE_TAG = "error.message"

# Keys appended to a span to record a repair.
RESERVED_TAGS = frozenset(
    {NEGATIVE_DURATION_TAG, ZERO_PARENT_ID_TAG, ERROR_MESSAGE_TAG}
)
