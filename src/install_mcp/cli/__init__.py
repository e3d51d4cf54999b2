# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT
