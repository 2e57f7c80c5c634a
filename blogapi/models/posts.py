from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from . import Base

class Post(Base):
    __tablename__ = 'posts'
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), index=True, nullable=False)

    user = relationship('User', back_populates='posts')
    # comments.post_id carries no FK constraint; deleting a post leaves its comments in place
    comments = relationship(
        'Comment',
        primaryjoin='Post.id == foreign(Comment.post_id)',
        back_populates='post',
        order_by='Comment.id',
        passive_deletes='all',
    )
