"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-03
@Docs: ORM schema sources.
ORM 模式来源适配层。
"""
