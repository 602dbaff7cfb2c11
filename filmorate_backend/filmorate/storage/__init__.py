"""存储层：每种实体一个存储类，均以显式传入的数据库会话构造"""
