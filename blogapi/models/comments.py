from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship
from . import Base

class Comment(Base):
    __tablename__ = 'comments'
    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    user_id = Column(Integer, nullable=True)
    post_id = Column(Integer, index=True, nullable=False)

    post = relationship(
        'Post',
        primaryjoin='foreign(Comment.post_id) == Post.id',
        back_populates='comments',
    )
