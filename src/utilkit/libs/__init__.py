# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Stand-ins for the external services used by utilkit.services.

None of these touch the network; they exist so that the service wrappers
have real collaborators to patch in tests.
"""
